# Copyright (c) 2024 OpenMined
# SPDX-License-Identifier: Apache-2.0
"""Runner submodule for applying diary actions from JSON requests.

Usage:
    python -m day_scheduler.runner < request.json > response.json

Exports:
    Executor: Orchestrates one diary action
    RunnerInput: Request schema
    RunnerOutput: Response schema
"""

from .executor import ExecutionError, Executor
from .schema import RunnerInput, RunnerOutput

__all__ = [
    "ExecutionError",
    "Executor",
    "RunnerInput",
    "RunnerOutput",
]

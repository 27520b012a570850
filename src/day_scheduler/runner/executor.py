# Copyright (c) 2024 OpenMined
# SPDX-License-Identifier: Apache-2.0
"""Executor for running a single diary action.

Orchestrates the full flow:
1. Create store from configuration
2. Restore the Diary from the store
3. Move to the requested day
4. Apply the action
5. Return the rendered day
"""

from __future__ import annotations

import warnings

from day_scheduler._internal.clock import Clock, FixedClock, SystemClock
from day_scheduler.config import create_store
from day_scheduler.diary import Diary
from day_scheduler.exceptions import DiaryStorageWarning, SchedulerError
from day_scheduler.stores import Store
from day_scheduler.view import render_day

from .schema import RunnerInput, RunnerOutput


class ExecutionError(SchedulerError):
    """Raised when a request cannot be carried out."""

    pass


class Executor:
    """Executes one diary action against persistent state.

    The executor is designed for dependency injection to support testing.
    Pass a custom store or clock to the constructor to override the ones
    built from the request.

    Example:
        executor = Executor()
        output = await executor.execute(input_data)

        # For testing with a shared store:
        store = InMemoryStore()
        executor = Executor(store=store)
    """

    def __init__(self, store: Store | None = None, clock: Clock | None = None) -> None:
        self._injected_store = store
        self._injected_clock = clock

    async def execute(self, input_data: RunnerInput) -> RunnerOutput:
        """Run the request, turning every failure into an error output."""
        with warnings.catch_warnings(record=True) as caught:
            warnings.simplefilter("always", DiaryStorageWarning)
            try:
                output = await self._execute_internal(input_data)
            except Exception as e:
                output = RunnerOutput(success=False, error=str(e), error_type=type(e).__name__)
        output.warnings = [
            str(w.message) for w in caught if issubclass(w.category, DiaryStorageWarning)
        ]
        return output

    async def _execute_internal(self, input_data: RunnerInput) -> RunnerOutput:
        """Internal execution logic.

        Separated from execute() to allow exception propagation
        for testing while execute() catches all errors.
        """
        config = input_data.config
        store = self._injected_store or create_store(config.store)
        owns_store = self._injected_store is None

        try:
            diary = Diary(
                store,
                clock=self._resolve_clock(input_data),
                starting_hour=config.starting_hour,
                ending_hour=config.ending_hour,
                storage_key=config.storage_key,
            )
            await diary.restore()

            if input_data.day is not None:
                diary.go_to_date(input_data.day)

            if input_data.action == "update_note":
                if input_data.index is None:
                    raise ExecutionError("'update_note' requires 'index'")
                await diary.update_note(input_data.index, input_data.note)
            elif input_data.action == "clear":
                await diary.clear_storage()
                diary.schedules = []

            return RunnerOutput(success=True, result=render_day(diary).to_dict())
        finally:
            if owns_store and hasattr(store, "close"):
                await store.close()

    def _resolve_clock(self, input_data: RunnerInput) -> Clock:
        if self._injected_clock is not None:
            return self._injected_clock
        if input_data.now is not None:
            return FixedClock(input_data.now)
        return SystemClock()

import asyncio
from typing import Coroutine, Set

class ViewModelScope:
    """Owns the tasks a view model launches; cancelling the scope cancels them all."""

    def __init__(self):
        self._tasks: Set[asyncio.Task] = set()
        self._cancelled = False

    def launch(self, coro: Coroutine) -> asyncio.Task:
        if self._cancelled:
            coro.close()
            raise RuntimeError("Scope has been cancelled")
        task = asyncio.get_running_loop().create_task(coro)
        self._tasks.add(task)
        task.add_done_callback(self._tasks.discard)
        return task

    async def join(self):
        while self._tasks:
            await asyncio.gather(*list(self._tasks), return_exceptions=True)

    def cancel(self):
        self._cancelled = True
        for task in list(self._tasks):
            task.cancel()

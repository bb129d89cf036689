"""Task contract and sequential composition."""
import logging
from abc import ABC, abstractmethod
from typing import Any, Generic, Sequence, Tuple, TypeVar

logger = logging.getLogger(__name__)

InputT = TypeVar("InputT")
OutputT = TypeVar("OutputT")


class AppCenterTask(ABC, Generic[InputT, OutputT]):
    """
    One asynchronous step of an upload workflow.

    ``execute`` either returns the output or raises ``AppCenterError``.
    """

    @abstractmethod
    async def execute(self, request: InputT) -> OutputT:
        pass


class TaskChain(AppCenterTask[Any, Any]):
    """
    Runs tasks one after another, feeding each output to the next task.

    The first raised error stops the chain; later tasks are never started.

    Usage:
        chain = TaskChain([create_resource]).then(upload_app)
        result = await chain.execute(request)
    """

    def __init__(self, tasks: Sequence[AppCenterTask] = ()):
        self._tasks: Tuple[AppCenterTask, ...] = tuple(tasks)

    @property
    def tasks(self) -> Tuple[AppCenterTask, ...]:
        return self._tasks

    def then(self, task: AppCenterTask) -> "TaskChain":
        return TaskChain(self._tasks + (task,))

    async def execute(self, request: Any) -> Any:
        value = request
        for index, task in enumerate(self._tasks):
            logger.debug("Running task %d/%d: %s", index + 1, len(self._tasks), type(task).__name__)
            value = await task.execute(value)
        return value

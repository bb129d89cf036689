"""Tests for task composition."""
from unittest.mock import AsyncMock, Mock

import pytest

from appcenter_uploader.exceptions import AppCenterError
from appcenter_uploader.models import ReleaseUploadBeginResponse, UploadRequest
from appcenter_uploader.tasks import AppCenterTask, CreateUploadResourceTask, TaskChain


class AppendTask(AppCenterTask[list, list]):
    def __init__(self, name: str):
        self.name = name

    async def execute(self, request: list) -> list:
        return request + [self.name]


class FailingTask(AppCenterTask[list, list]):
    async def execute(self, request: list) -> list:
        raise AppCenterError("stage failed", ValueError("boom"))


@pytest.mark.asyncio
async def test_chain_feeds_outputs_forward():
    chain = TaskChain([AppendTask("a")]).then(AppendTask("b"))

    assert await chain.execute([]) == ["a", "b"]


@pytest.mark.asyncio
async def test_then_returns_new_chain():
    base = TaskChain([AppendTask("a")])
    extended = base.then(AppendTask("b"))

    assert len(base.tasks) == 1
    assert len(extended.tasks) == 2


@pytest.mark.asyncio
async def test_failure_short_circuits():
    last = Mock(spec=AppCenterTask)
    last.execute = AsyncMock()
    chain = TaskChain([AppendTask("a"), FailingTask(), last])

    with pytest.raises(AppCenterError, match="stage failed: boom"):
        await chain.execute([])

    last.execute.assert_not_awaited()


@pytest.mark.asyncio
async def test_empty_chain_returns_input():
    assert await TaskChain().execute(["x"]) == ["x"]


@pytest.mark.asyncio
async def test_create_upload_resource_feeds_next_task():
    service = Mock()
    service.begin_release_upload = AsyncMock(
        return_value=ReleaseUploadBeginResponse("U1", "D1", "T1", "P1")
    )
    factory = Mock()
    factory.create_service.return_value = service
    next_task = Mock(spec=AppCenterTask)
    next_task.execute = AsyncMock(side_effect=lambda request: request)

    chain = TaskChain([CreateUploadResourceTask(Mock(), factory), next_task])
    result = await chain.execute(UploadRequest.builder("o", "a", "1.0").build())

    forwarded = next_task.execute.await_args.args[0]
    assert forwarded.upload_id == "U1"
    assert result is forwarded

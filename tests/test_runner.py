"""Tests for the queue loop."""

from unittest.mock import MagicMock, patch

from assembly_shared import QueueMessage
from assembly_worker.runner import run_loop


def test_run_loop_handles_and_deletes() -> None:
    receiver = MagicMock()
    receiver.receive.return_value = [QueueMessage("rh-1", '{"video_id": 1, "path": "/v/1"}')]
    pipeline = MagicMock()
    run_loop(receiver, pipeline, max_iterations=1)
    pipeline.handle.assert_called_once_with('{"video_id": 1, "path": "/v/1"}')
    receiver.delete.assert_called_once_with("rh-1")


def test_run_loop_keeps_message_on_unexpected_exception() -> None:
    receiver = MagicMock()
    receiver.receive.return_value = [QueueMessage("rh-1", "body-1"), QueueMessage("rh-2", "body-2")]
    pipeline = MagicMock()
    pipeline.handle.side_effect = [RuntimeError("bug"), None]
    run_loop(receiver, pipeline, max_iterations=1)
    receiver.delete.assert_called_once_with("rh-2")


def test_run_loop_sleeps_when_queue_empty() -> None:
    receiver = MagicMock()
    receiver.receive.return_value = []
    pipeline = MagicMock()
    with patch("assembly_worker.runner.time.sleep") as mock_sleep:
        run_loop(receiver, pipeline, poll_interval_sec=2.5, max_iterations=2)
    assert mock_sleep.call_count == 2
    mock_sleep.assert_called_with(2.5)
    pipeline.handle.assert_not_called()

import logging
from unittest.mock import MagicMock, patch

import pytest

import discrim
from discrim._log import LogMessage


@pytest.mark.required
@patch.object(logging.StreamHandler, "emit")
def test_discrim_log_default(mock_emit):
    discrim.log()
    assert mock_emit.called


@pytest.mark.required
def test_discrim_log_custom():
    mock_handler = logging.StreamHandler()
    mock_handler.emit = MagicMock()
    discrim.log(logging.DEBUG, mock_handler)
    assert mock_handler.emit.called


@pytest.mark.required
def test_log_message_deferred():
    fn = MagicMock(return_value="expensive")
    message = LogMessage(fn)
    fn.assert_not_called()
    assert str(message) == "expensive"
    assert str(message) == "expensive"
    fn.assert_called_once()

"""
Tests for interrupt handling.
"""

import signal

import pytest

from autobuilder.orchestration import SignalHandler


@pytest.mark.unit
class TestSignalHandler:
    """Test cases for SignalHandler."""

    def test_install_and_restore(self):
        original = signal.getsignal(signal.SIGINT)
        handler = SignalHandler()

        handler.install()
        try:
            assert signal.getsignal(signal.SIGINT) == handler._handle_interrupt
        finally:
            handler.restore()

        assert signal.getsignal(signal.SIGINT) == original

    def test_restore_without_install_is_noop(self):
        original = signal.getsignal(signal.SIGINT)

        SignalHandler().restore()

        assert signal.getsignal(signal.SIGINT) == original

    def test_interrupt_exits_with_status_zero(self, caplog):
        with pytest.raises(SystemExit) as exc_info:
            SignalHandler()._handle_interrupt(signal.SIGINT, None)

        assert exc_info.value.code == 0

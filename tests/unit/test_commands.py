"""Unit tests for executable lookup."""

from unittest.mock import patch

from scriptrun.utils import is_command_available


class TestCommandAvailability:
    """Test command availability checking."""

    def test_python_is_available(self):
        """Test that python is available (since we're running tests)."""
        assert is_command_available("python") or is_command_available("python3")

    def test_nonexistent_command(self):
        """Test that nonexistent commands return False."""
        assert not is_command_available("this_command_definitely_does_not_exist_12345")

    @patch("shutil.which", return_value="/opt/bin/deno")
    def test_uses_which(self, mock_which):
        assert is_command_available("deno")
        mock_which.assert_called_once_with("deno")

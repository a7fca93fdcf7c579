"""Tests for tfc_setup.utils module."""
import logging
import pytest
from unittest.mock import patch
from tfc_setup import utils


def test_command_exists_when_command_found():
    """Test command_exists returns True when command is found."""
    with patch('shutil.which', return_value='/usr/bin/terraform'):
        assert utils.command_exists('terraform') is True


def test_command_exists_when_command_not_found():
    """Test command_exists returns False when command not found."""
    with patch('shutil.which', return_value=None):
        assert utils.command_exists('nonexistent') is False


def test_get_real_home_when_sudo():
    """Test get_real_home returns sudo user's home."""
    with patch.dict('os.environ', {'SUDO_USER': 'testuser'}):
        with patch('os.path.expanduser', return_value='/home/testuser'):
            assert utils.get_real_home() == '/home/testuser'


def test_get_real_home_when_not_sudo():
    """Test get_real_home returns current user's home."""
    with patch.dict('os.environ', {'HOME': '/home/normaluser'}, clear=True):
        assert utils.get_real_home() == '/home/normaluser'


def test_log_info(capsys):
    """Test log_info outputs formatted message."""
    utils.log_info("Test message")
    captured = capsys.readouterr()
    assert "[INFO] Test message\n" == captured.out


def test_log_action(capsys):
    """Test log_action outputs indented message."""
    utils.log_action("Creating workspace")
    captured = capsys.readouterr()
    assert "  -> Creating workspace\n" == captured.out


@pytest.mark.parametrize("helper", [utils.info, utils.success, utils.fail])
def test_colored_helpers_print_message(capsys, helper):
    """Colored helpers print the plain message when output is not a terminal."""
    helper("Hello there")
    assert capsys.readouterr().out == "Hello there\n"


def test_divider(capsys):
    utils.divider()
    assert capsys.readouterr().out == "=" * 72 + "\n"


@pytest.mark.parametrize("verbose,level", [(True, logging.DEBUG), (False, logging.WARNING)])
def test_setup_logging(verbose, level):
    """Test setup_logging picks the level from the verbose flag."""
    with patch('tfc_setup.utils.logging.basicConfig') as mock_config:
        utils.setup_logging(verbose=verbose)
    assert mock_config.call_args.kwargs['level'] == level

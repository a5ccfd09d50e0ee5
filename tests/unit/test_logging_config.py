"""
Unit tests for logging configuration.
"""

import logging

from cursor_keeper.utils.logging_config import get_logger, setup_file_logging


class TestGetLogger:
    """Test logger factory."""
    
    def test_namespaced(self):
        assert get_logger("test_namespaced").name == "cursor_keeper.test_namespaced"
    
    def test_single_handler(self):
        """Repeated calls do not stack handlers."""
        logger = get_logger("test_single_handler")
        get_logger("test_single_handler")
        assert len(logger.handlers) == 1
        assert logger.propagate is False
    
    def test_level(self):
        assert get_logger("test_level", level=logging.DEBUG).level == logging.DEBUG


class TestSetupFileLogging:
    """Test file logging."""
    
    def test_writes_to_file(self, tmp_path):
        logger = get_logger("test_file_output")
        log_file = setup_file_logging(tmp_path / "logs")
        
        try:
            logger.warning("failure reading cursor from storage")
            for handler in logger.handlers:
                handler.flush()
            
            assert log_file == tmp_path / "logs" / "cursor_keeper.log"
            assert "failure reading cursor from storage" in log_file.read_text()
        finally:
            file_handlers = [h for h in logger.handlers if isinstance(h, logging.FileHandler)]
            for handler in file_handlers:
                handler.close()
            for name in list(logging.Logger.manager.loggerDict):
                if name == "cursor_keeper" or name.startswith("cursor_keeper."):
                    existing = logging.getLogger(name)
                    for handler in file_handlers:
                        existing.removeHandler(handler)

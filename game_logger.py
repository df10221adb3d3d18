"""
game_logger.py - Structured logging for the Bulls & Cows server

Each entry is one JSON object: timestamp, event_type, action, user, details.
The secret word never goes into a log line while its round is still running.
"""

import json
import logging
from datetime import datetime
from pathlib import Path
from typing import Any, Dict, Optional


LOGGER_NAME = 'bulls_cows'


class GameLogger:
    """
    Thin wrapper around the `bulls_cows` logger.

    Handlers are attached by configure(), which create_app calls once the
    config is known. Until then entries propagate to whatever the root
    logger does (nothing, in tests).
    """

    def __init__(self, name: str = LOGGER_NAME):
        self.logger = logging.getLogger(name)

    def configure(self, level: str = 'INFO', log_dir: Optional[str] = None) -> logging.Logger:
        logger = self.logger
        logger.setLevel(level.upper() if isinstance(level, str) else level)

        # Prevent duplicate handlers when the app is built more than once
        for handler in list(logger.handlers):
            logger.removeHandler(handler)
            handler.close()

        console_handler = logging.StreamHandler()
        console_handler.setFormatter(logging.Formatter('%(levelname)s: %(message)s'))
        logger.addHandler(console_handler)

        if log_dir:
            path = Path(log_dir)
            path.mkdir(parents=True, exist_ok=True)
            log_file = path / f"game_log_{datetime.now().strftime('%Y-%m-%d')}.log"
            file_handler = logging.FileHandler(log_file, encoding='utf-8')
            file_handler.setFormatter(logging.Formatter(
                '%(asctime)s | %(levelname)s | %(message)s',
                datefmt='%Y-%m-%d %H:%M:%S'
            ))
            logger.addHandler(file_handler)

        return logger

    def _get_user_identity(self, request) -> Dict[str, Optional[str]]:
        if request is None:
            return {'user_ip': None}
        return {'user_ip': request.remote_addr or 'unknown'}

    def _create_log_entry(self,
                          event_type: str,
                          action: str,
                          user_info: Dict[str, Optional[str]],
                          details: Dict[str, Any]) -> str:
        log_entry = {
            'timestamp': datetime.now().isoformat(),
            'event_type': event_type,
            'action': action,
            'user': user_info,
            'details': details
        }
        return json.dumps(log_entry, ensure_ascii=False, default=str)

    def log_user_action(self, request, action: str, **kwargs):
        """
        Log what the player asked for.

        Args:
            request: Flask request object
            action: e.g. 'guess', 'reset', 'get_state'
            **kwargs: extra details (the raw guess, for instance)
        """
        details = {
            'endpoint': request.endpoint,
            'method': request.method,
            **kwargs
        }
        self.logger.info(self._create_log_entry(
            'USER_ACTION', action, self._get_user_identity(request), details))

    def log_server_response(self,
                            request,
                            action: str,
                            success: bool,
                            response_data: Dict[str, Any],
                            **kwargs):
        """Log what we answered. Rejected guesses are logged as warnings."""
        details = {
            'success': success,
            'response_data': self._sanitize_response_data(response_data),
            **kwargs
        }
        event_type = 'SERVER_RESPONSE_SUCCESS' if success else 'SERVER_RESPONSE_ERROR'
        message = self._create_log_entry(event_type, action, self._get_user_identity(request), details)

        if success:
            self.logger.info(message)
        else:
            self.logger.warning(message)

    def log_game_event(self, event: str, request=None, **kwargs):
        """Round lifecycle: game_started, game_won, game_lost, game_reset."""
        self.logger.info(self._create_log_entry(
            'GAME_EVENT', event, self._get_user_identity(request), dict(kwargs)))

    def _sanitize_response_data(self, data: Dict[str, Any]) -> Dict[str, Any]:
        if not isinstance(data, dict):
            return {'data_type': type(data).__name__}

        sanitized = data.copy()
        state = sanitized.get('state')
        if isinstance(state, dict):
            sanitized['state'] = {
                'status': state.get('status'),
                'guesses_count': len(state.get('history', [])),
                'guesses_remaining': state.get('guesses_remaining'),
                'answer_revealed': state.get('secret') is not None,
            }
        return sanitized


game_logger = GameLogger()

"""
Game Logger Module for the Evil Hangman Server

This module provides logging for user actions, server responses and round
events. The engine logs through child loggers of `hangman_game`, so its
debug output lands in the same files.
"""

import logging
import json
from datetime import datetime
from typing import Dict, Any, Optional
from pathlib import Path

from ..config.app_config import Config
from .helpers import get_user_identity

LOGGER_NAME = 'hangman_game'


class GameLogger:
    """
    Centralized logging system for the hangman server.

    Features:
    - User action tracking with IP identification
    - Server response logging
    - Round event logging (won, lost, deleted)
    - JSON structured logs for easy parsing
    """

    def __init__(self, log_dir: str = "logs", level: str = "INFO"):
        self.log_dir = Path(log_dir)
        self.log_dir.mkdir(parents=True, exist_ok=True)
        self.level = logging.getLevelName(level.upper()) if isinstance(level, str) else level
        if not isinstance(self.level, int):
            self.level = logging.INFO

        # Setup main game logger
        self.logger = self._setup_logger()

    def _log_file(self) -> Path:
        return self.log_dir / f"game_log_{datetime.now().strftime('%Y-%m-%d')}.log"

    def _setup_logger(self) -> logging.Logger:
        """Setup the main game logger with file handler."""
        logger = logging.getLogger(LOGGER_NAME)
        logger.setLevel(self.level)

        # Prevent duplicate handlers
        if logger.handlers:
            for handler in list(logger.handlers):
                handler.close()
            logger.handlers.clear()

        # File handler for detailed logs
        file_handler = logging.FileHandler(self._log_file(), encoding='utf-8')
        file_handler.setLevel(self.level)

        # Console handler for only important messages (WARNING and above)
        console_handler = logging.StreamHandler()
        console_handler.setLevel(logging.WARNING)

        file_formatter = logging.Formatter(
            '%(asctime)s | %(levelname)s | %(message)s',
            datefmt='%Y-%m-%d %H:%M:%S'
        )
        console_formatter = logging.Formatter(
            '%(levelname)s: %(message)s'
        )

        file_handler.setFormatter(file_formatter)
        console_handler.setFormatter(console_formatter)

        logger.addHandler(file_handler)
        logger.addHandler(console_handler)

        return logger

    def _create_log_entry(self,
                          event_type: str,
                          action: str,
                          user_info: Dict[str, str],
                          details: Dict[str, Any]) -> str:
        """Create a structured log entry."""
        log_entry = {
            'timestamp': datetime.now().isoformat(),
            'event_type': event_type,
            'action': action,
            'user': user_info,
            'details': details
        }
        return json.dumps(log_entry, ensure_ascii=False, default=str)

    def log_user_action(self,
                        request,
                        action: str,
                        game_id: Optional[str] = None,
                        **kwargs):
        """
        Log user actions with full context.

        Args:
            request: Flask request object
            action: Type of action (e.g., 'new_game', 'submit_guess', 'get_state')
            game_id: Game identifier if applicable
            **kwargs: Additional details to log
        """
        details = {
            'game_id': game_id,
            'endpoint': request.endpoint,
            'method': request.method,
            'url': request.url,
            **kwargs
        }

        log_message = self._create_log_entry('USER_ACTION', action, get_user_identity(request), details)
        self.logger.info(log_message)

    def log_server_response(self,
                            request,
                            action: str,
                            success: bool,
                            response_data: Dict[str, Any],
                            game_id: Optional[str] = None,
                            **kwargs):
        """
        Log server responses with full context.

        Args:
            request: Flask request object
            action: Action that was performed
            success: Whether the action succeeded
            response_data: Data being returned to client
            game_id: Game identifier if applicable
            **kwargs: Additional details to log
        """
        details = {
            'game_id': game_id,
            'success': success,
            'response_size': len(str(response_data)),
            'response_data': self._sanitize_response_data(response_data),
            **kwargs
        }

        event_type = 'SERVER_RESPONSE_SUCCESS' if success else 'SERVER_RESPONSE_ERROR'
        log_message = self._create_log_entry(event_type, action, get_user_identity(request), details)

        if success:
            self.logger.info(log_message)
        else:
            self.logger.error(log_message)

    def log_game_event(self,
                       game_id: Optional[str],
                       event: str,
                       user_ip: str,
                       **kwargs):
        """
        Log round events (wins, losses, deletions).

        Args:
            game_id: Game identifier
            event: Type of event (e.g., 'game_won', 'game_lost', 'game_deleted')
            user_ip: User's IP address
            **kwargs: Additional round details
        """
        user_info = {'user_ip': user_ip or 'unknown', 'session_id': None, 'username': None}

        details = {
            'game_id': game_id,
            **kwargs
        }

        log_message = self._create_log_entry('GAME_EVENT', event, user_info, details)
        self.logger.info(log_message)

    def log_error(self,
                  request,
                  error: Exception,
                  action: str,
                  game_id: Optional[str] = None):
        """Log errors with full context."""
        details = {
            'game_id': game_id,
            'error_type': type(error).__name__,
            'error_message': str(error),
            'action': action
        }

        log_message = self._create_log_entry('ERROR', action, get_user_identity(request), details)
        self.logger.error(log_message)

    def _sanitize_response_data(self, data: Dict[str, Any]) -> Dict[str, Any]:
        """Keep round summaries small and never log an unrevealed answer."""
        if not isinstance(data, dict):
            return {'data_type': type(data).__name__}

        sanitized = data.copy()

        if 'state' in sanitized and isinstance(sanitized['state'], dict):
            state = sanitized['state']
            sanitized['state'] = {
                'pattern': state.get('pattern'),
                'guesses_left': state.get('guesses_left'),
                'live_word_count': state.get('live_word_count'),
                'status': state.get('status'),
                'guesses_count': len(state.get('guessed_letters', [])),
                'answer_revealed': state.get('answer') is not None
            }

        if 'partitions' in sanitized and isinstance(sanitized['partitions'], dict):
            sanitized['partitions'] = {'family_count': len(sanitized['partitions'])}

        return sanitized

    def get_log_stats(self) -> Dict[str, Any]:
        """Get statistics about today's logged events."""
        log_file = self._log_file()
        if not log_file.exists():
            return {'error': 'No log file found for today'}

        stats = {
            'log_file': str(log_file),
            'file_size_mb': round(log_file.stat().st_size / (1024 * 1024), 2),
            'total_entries': 0,
            'user_actions': 0,
            'server_responses': 0,
            'game_events': 0,
            'errors': 0
        }

        try:
            with open(log_file, 'r', encoding='utf-8') as f:
                for line in f:
                    if line.strip():
                        stats['total_entries'] += 1
                        if 'USER_ACTION' in line:
                            stats['user_actions'] += 1
                        elif 'SERVER_RESPONSE' in line:
                            stats['server_responses'] += 1
                        elif 'GAME_EVENT' in line:
                            stats['game_events'] += 1
                        elif 'ERROR' in line:
                            stats['errors'] += 1
        except OSError as e:
            return {'error': f'Failed to get stats: {e}'}

        return stats


# Global logger instance
game_logger = GameLogger(Config.LOG_DIR, "DEBUG" if Config.ENGINE_DEBUG else Config.LOG_LEVEL)

"""Pieces shared by every domain module: Ok/Err results and the event base."""

from taskmeter.domain.shared.events import DomainEvent
from taskmeter.domain.shared.result import Err, Ok, Result, is_err, is_ok, map_result

__all__ = ["DomainEvent", "Err", "Ok", "Result", "is_err", "is_ok", "map_result"]

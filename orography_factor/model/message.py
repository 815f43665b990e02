"""Message - User-facing status messages for the orography playground.

Architecture:
- STATUS (under the form): ONE message at a time, loading / done / failure
- ADVISORY (under the results): complex-orography warning when c0 is too high

Messages know their own display level; the app only calls display().
"""

import logging
from abc import ABC, abstractmethod
from dataclasses import dataclass
from enum import Enum

from orography_factor.model.warning import TerrainWarning

logger = logging.getLogger(__name__)


class MessageLevel(Enum):
    """Display level for UI messages."""

    INFO = "info"  # Blue - loading
    SUCCESS = "success"  # Green - computation done
    WARNING = "warning"  # Yellow - advisories
    ERROR = "error"  # Red - failures


@dataclass(frozen=True)
class Message(ABC):
    """Abstract base class for messages rendered as Streamlit status blocks."""

    @property
    @abstractmethod
    def message(self) -> str:
        """Formatted message for display in Streamlit."""
        raise NotImplementedError

    @property
    @abstractmethod
    def level(self) -> MessageLevel:
        """Display level."""
        raise NotImplementedError

    def display(self) -> None:
        """Render this message using the appropriate Streamlit function."""
        import streamlit as st

        render_fn = {
            MessageLevel.INFO: st.info,
            MessageLevel.SUCCESS: st.success,
            MessageLevel.WARNING: st.warning,
            MessageLevel.ERROR: st.error,
        }[self.level]
        render_fn(self.message)


@dataclass(frozen=True)
class ComputingMessage(Message):
    """Shown while elevations are fetched."""

    @property
    def level(self) -> MessageLevel:
        return MessageLevel.INFO

    @property
    def message(self) -> str:
        return "Fetching elevations & calculating…"


@dataclass(frozen=True)
class CompletedMessage(Message):
    """Computation finished."""

    @property
    def level(self) -> MessageLevel:
        return MessageLevel.SUCCESS

    @property
    def message(self) -> str:
        return "Done."


@dataclass(frozen=True)
class FailureMessage(Message):
    """Input was invalid or a computation step failed."""

    reason: str

    @property
    def level(self) -> MessageLevel:
        return MessageLevel.ERROR

    @property
    def message(self) -> str:
        return self.reason or "Something went wrong."

    def display(self) -> None:
        logger.info(f"[FAILURE] {self.message}")
        super().display()


@dataclass(frozen=True)
class AdvisoryMessage(Message):
    """Wraps a TerrainWarning for display."""

    warning: TerrainWarning

    @property
    def level(self) -> MessageLevel:
        return MessageLevel.WARNING

    @property
    def message(self) -> str:
        return self.warning.message

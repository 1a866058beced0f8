from .fakes import RecordingGuard

__all__ = ["RecordingGuard"]

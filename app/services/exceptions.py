"""
Domain errors raised by the service layer

The application maps each one to an HTTP status in app.main, so routers
let them propagate.
"""


class ProfileNotFoundError(LookupError):
    """No user profile with the given id"""


class SessionNotFoundError(LookupError):
    """No open quiz session with the given id"""


class TaskNotFoundError(LookupError):
    """No scheduled task with the given id"""


class QuizSessionError(ValueError):
    """An operation is not valid for the session's current state or the answer is malformed"""


class InvalidScheduleError(ValueError):
    """A task would end before it starts, or a time range is inverted"""


class PersistenceError(RuntimeError):
    """Every write path failed while storing a quiz result"""

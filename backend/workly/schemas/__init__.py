# Auth schemas
from .auth import SessionPayload, SessionResponse

# Driver result schemas
from .common import InsertResult, UpdateResult

# Job / application schemas
from .job import JobCreate
from .application import ApplicationCreate, ApplicationStatusUpdate

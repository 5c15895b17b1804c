from .learner_command_service import LearnerCommandService
from .learner_query_service import LearnerQueryService
from .parent_command_service import ParentCommandService
from .parent_query_service import ParentQueryService
from .school_event_command_service import SchoolEventCommandService
from .school_event_permission_service import SchoolEventPermissionService
from .school_event_query_service import SchoolEventQueryService

__all__ = [
    "LearnerCommandService",
    "LearnerQueryService",
    "ParentCommandService",
    "ParentQueryService",
    "SchoolEventCommandService",
    "SchoolEventPermissionService",
    "SchoolEventQueryService",
]

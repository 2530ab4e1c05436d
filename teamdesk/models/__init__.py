"""
ORM model package. Import all models here so Alembic autogenerate
can discover every table through the shared Base metadata.
"""
from teamdesk.models.user import User  # noqa: F401
from teamdesk.models.team import Team, TeamMember  # noqa: F401
from teamdesk.models.document import Document  # noqa: F401
from teamdesk.models.task import Task  # noqa: F401
from teamdesk.models.meeting import Meeting  # noqa: F401
from teamdesk.models.email_archive import EmailArchive  # noqa: F401
from teamdesk.models.activity_log import ActivityLog  # noqa: F401

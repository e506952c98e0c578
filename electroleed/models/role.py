"""The fixed set of roles a user account can hold."""

import enum


class Role(str, enum.Enum):
    """
    ADMIN: full administration access.
    ESTIMATOR: prepares cost estimates.
    SCHEDULER: plans and manages work schedules.
    PROJECT_MANAGER: oversees project delivery.
    PROJECT_MEMBER: carries out project tasks.
    """

    ADMIN = "ADMIN"
    ESTIMATOR = "ESTIMATOR"
    SCHEDULER = "SCHEDULER"
    PROJECT_MANAGER = "PROJECT_MANAGER"
    PROJECT_MEMBER = "PROJECT_MEMBER"

    @property
    def authority(self) -> str:
        return f"ROLE_{self.value}"

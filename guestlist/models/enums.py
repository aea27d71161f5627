from enum import Enum


class HouseholdRole(str, Enum):
    """Family members who log in and pay for things"""

    BRIDE = "bride"
    BROTHER = "brother"
    FATHER = "father"
    MOTHER = "mother"

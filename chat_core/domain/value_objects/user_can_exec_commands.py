"""
UserCanExecCommands Value Object - Whether the user may run chat commands.
"""

from dataclasses import dataclass

from chat_core.domain.value_objects.bool_value_object import BoolValueObject


@dataclass(frozen=True)
class UserCanExecCommands(BoolValueObject):
    pass

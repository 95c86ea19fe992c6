# SPDX-License-Identifier: MIT

from typing import Literal, TypedDict

from clientdesk.model.entity_id import EntityId

IdMapEntityType = Literal[
    "clients",
    "tasks",
    "payments",
]


type IdMapDict = dict[IdMapEntityType, IdMapMapping]


class IdMap(TypedDict):
    """
    All dictionaries are mapped in the following way:

    Synthetic id : real entity id.

    Synthetic ids are the short integers shown in views and typed on the
    command line. Real ids are the UUID strings stored with each record.

    Example:

    Task with an id of "9b1d...".
    Synthetic id for that task is 7.

    real_task_id = id_map["tasks"]["synthetic_to_real"][7] # returns "9b1d..."
    """

    clients: "IdMapMapping"
    tasks: "IdMapMapping"
    payments: "IdMapMapping"


class IdMapMapping(TypedDict):
    synthetic_to_real: dict[int, EntityId]
    real_to_synthetic: dict[EntityId, int]

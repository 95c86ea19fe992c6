# SPDX-License-Identifier: MIT

from clientdesk.model.id_map import IdMap


def get_id_map_template() -> IdMap:
    return {
        "clients": {"synthetic_to_real": {}, "real_to_synthetic": {}},
        "tasks": {"synthetic_to_real": {}, "real_to_synthetic": {}},
        "payments": {"synthetic_to_real": {}, "real_to_synthetic": {}},
    }

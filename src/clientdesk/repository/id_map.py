# SPDX-License-Identifier: MIT

from typing import Optional, TypeIs, cast, get_args

from clientdesk import configuration
from clientdesk.model.entity_id import EntityId
from clientdesk.model.id_map import IdMap, IdMapDict, IdMapEntityType
from clientdesk.repository.persistence import read_document, write_document
from clientdesk.template.id_map import get_id_map_template

ENTITY_TYPES = get_args(IdMapEntityType)


class IdMapRepository:
    def __init__(self) -> None:
        self._id_map: Optional[IdMap] = None
        self.is_dirty = False

    @property
    def id_map(self) -> IdMap:
        if self._id_map is None:
            self.__load_data()
        if self._id_map is None:
            raise ValueError()
        return self._id_map

    def __load_data(self) -> None:
        self._id_map = get_id_map_template()
        if not configuration.DATA_ID_MAP_PATH.is_file():
            return
        loaded = read_document(configuration.DATA_ID_MAP_PATH)
        if loaded is not None:
            # Entity types added after the file was written start empty
            self._id_map.update(loaded)

    def __save_data(self, id_map: IdMap) -> None:
        write_document(configuration.DATA_ID_MAP_PATH, id_map)

    def flush(self) -> bool:
        if self._id_map is not None and self.is_dirty:
            self.__save_data(self._id_map)
            self.is_dirty = False
            return True
        return False

    def clear_ids(self) -> None:
        self.is_dirty = True
        self._id_map = get_id_map_template()

    def associate_id(self, entity_type: str, entity_id: EntityId) -> int:
        """
        Create a new synthetic id to associate with an entity id
        """
        if self.__narrow_to_entity_type(entity_type):
            id_map_dict = cast(IdMapDict, self.id_map)
            mapping = id_map_dict[entity_type]
            if entity_id in mapping["real_to_synthetic"]:
                return mapping["real_to_synthetic"][entity_id]

            self.is_dirty = True
            next_id = len(mapping["real_to_synthetic"]) + 1
            mapping["real_to_synthetic"][entity_id] = next_id
            mapping["synthetic_to_real"][next_id] = entity_id

            return next_id
        raise TypeError(
            f"{IdMapRepository.associate_id.__name__}: expected one of {ENTITY_TYPES}"
        )

    def get_real_id(self, entity_type: str, synthetic_id: int) -> EntityId:
        """
        Get the entity id associated with a synthetic id
        """
        if self.__narrow_to_entity_type(entity_type):
            id_map_dict = cast(IdMapDict, self.id_map)
            synthetic_to_real = id_map_dict[entity_type]["synthetic_to_real"]
            if synthetic_id not in synthetic_to_real:
                raise ValueError(
                    f"Unknown {entity_type} id {synthetic_id}, list them to refresh ids"
                )
            return synthetic_to_real[synthetic_id]
        raise TypeError(
            f"{IdMapRepository.get_real_id.__name__}: expected one of {ENTITY_TYPES}"
        )

    def __narrow_to_entity_type(self, entity_type: str) -> TypeIs[IdMapEntityType]:
        return entity_type in ENTITY_TYPES


ID_MAP_REPO = IdMapRepository()

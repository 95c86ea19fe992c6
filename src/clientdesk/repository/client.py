# SPDX-License-Identifier: MIT

from copy import deepcopy
from typing import Any, Optional, cast

from clientdesk import configuration, time
from clientdesk.model.client import Client
from clientdesk.model.entity_id import EntityId, generate_entity_id
from clientdesk.repository.persistence import read_document, write_document


class ClientRepository:
    def __init__(self) -> None:
        self._clients: Optional[list[Client]] = None
        self.is_dirty = False

    @property
    def clients(self) -> list[Client]:
        if self._clients is None:
            self.__load_data()
        if self._clients is None:
            raise ValueError()
        return self._clients

    def __load_data(self) -> None:
        self._clients = []
        if not configuration.DATA_CLIENTS_PATH.is_file():
            return
        document = read_document(configuration.DATA_CLIENTS_PATH)
        if document is None:
            return
        for raw_client in document.get("clients") or []:
            self._clients.append(self.__convert_client_for_deserialization(raw_client))

    def __save_data(self) -> None:
        serializable_clients = [
            self.__convert_client_for_serialization(deepcopy(client))
            for client in self.clients
        ]
        write_document(
            configuration.DATA_CLIENTS_PATH, {"clients": serializable_clients}
        )

    def flush(self) -> bool:
        if self._clients is not None and self.is_dirty:
            self.__save_data()
            self.is_dirty = False
            return True
        return False

    def __convert_client_for_serialization(self, client: Client) -> dict[str, Any]:
        serializable_client = cast(dict[str, Any], client)
        serializable_client["created"] = time.datetime_to_iso_str(
            serializable_client["created"]
        )
        serializable_client["updated"] = time.datetime_to_iso_str(
            serializable_client["updated"]
        )
        return serializable_client

    def __convert_client_for_deserialization(self, client: dict[str, Any]) -> Client:
        deserializable_client = client
        deserializable_client["created"] = time.datetime_from_str(
            deserializable_client["created"]
        )
        deserializable_client["updated"] = time.datetime_from_str(
            deserializable_client["updated"]
        )
        return cast(Client, deserializable_client)

    def get_all_clients(self) -> list[Client]:
        return deepcopy(self.clients)

    def get_active_client(self) -> Optional[Client]:
        active_clients = [client for client in self.clients if client["active"]]
        if len(active_clients) == 0:
            return None
        return deepcopy(active_clients[0])

    def get_client(self, id: EntityId) -> Client:
        matches = [client for client in self.clients if client["id"] == id]
        if len(matches) == 0:
            raise ValueError(f"client {id} does not exist")
        return deepcopy(matches[0])

    def get_client_by_name(self, name: str) -> Client:
        matches = [client for client in self.clients if client["name"] == name]
        if len(matches) == 0:
            raise ValueError(f"No client named '{name}'")
        return deepcopy(matches[0])

    def save_new_client(self, client: Client) -> EntityId:
        """Store a new client and make it the active one."""
        if client["name"] is None or client["name"].strip() == "":
            raise ValueError("A client needs a name")

        # Check for duplicate names
        for existing_client in self.clients:
            if existing_client["name"] == client["name"]:
                raise ValueError(
                    f"A client with the name '{client['name']}' already exists"
                )

        self.is_dirty = True

        for existing_client in self.clients:
            existing_client["active"] = False

        client["id"] = generate_entity_id()
        client["active"] = True
        self.clients.append(client)
        return client["id"]

    def modify_client(
        self,
        id: EntityId,
        name: Optional[str],
        note: Optional[str],
        email: Optional[str],
        remove_note: bool,
        remove_email: bool,
    ) -> None:
        client = [client for client in self.clients if client["id"] == id][0]

        if name is not None:
            # Check for duplicate names (excluding the current client)
            for other in self.clients:
                if other["name"] == name and other["id"] != id:
                    raise ValueError(f"A client with the name '{name}' already exists")

        self.is_dirty = True
        # Set updated timestamp to current moment
        client["updated"] = time.now_utc()
        if name is not None:
            client["name"] = name
        if note is not None:
            client["note"] = note
        if email is not None:
            client["email"] = email.strip()
        if remove_note:
            client["note"] = None
        if remove_email:
            client["email"] = None

    def activate_client(self, id: EntityId) -> None:
        if id not in [client["id"] for client in self.clients]:
            raise ValueError(f"client {id} does not exist")

        self.is_dirty = True
        for client in self.clients:
            client["active"] = client["id"] == id


CLIENT_REPO = ClientRepository()

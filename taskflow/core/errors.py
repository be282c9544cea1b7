"""Erreurs métier et mapping vers les codes HTTP"""

from enum import Enum


class Operation(str, Enum):
    READ = "read"
    UPDATE = "update"
    DELETE = "delete"


class InvalidIdError(Exception):
    """L'identifiant reçu n'est pas un id de document valide."""

    def __init__(self, value, operation: Operation):
        self.value = value
        self.operation = operation
        super().__init__(f'Cast to ObjectId failed for value "{value}"')


def status_for_invalid_id(operation: Operation) -> int:
    # lecture/suppression -> 500, mise à jour -> 400
    if operation == Operation.UPDATE:
        return 400
    return 500

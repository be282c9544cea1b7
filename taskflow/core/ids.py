"""
Identifiants de documents.

Format: 24 caractères hexadécimaux = 4 octets de timestamp (secondes)
+ 5 octets aléatoires fixés par process + compteur sur 3 octets.
Le compteur repart de 0 à chaque seconde: deux ids créés par le même process
restent donc triables dans l'ordre de création.
"""

import os
import re
import threading
import time

from taskflow.core.errors import InvalidIdError, Operation

_ID_PATTERN = re.compile(r"^[0-9a-fA-F]{24}$")

_PROCESS_UNIQUE = os.urandom(5)
_COUNTER_MAX = 0xFFFFFF
_lock = threading.Lock()
_last_second = 0
_count = -1


def new_document_id() -> str:
    global _last_second, _count
    with _lock:
        # max(): l'horloge ne recule jamais pour les ids
        second = max(int(time.time()), _last_second)
        if second != _last_second:
            _last_second, _count = second, 0
        elif _count >= _COUNTER_MAX:
            # compteur épuisé pour cette seconde: on emprunte la suivante
            _last_second, _count = second + 1, 0
        else:
            _count += 1
        raw = (
            _last_second.to_bytes(4, "big")
            + _PROCESS_UNIQUE
            + _count.to_bytes(3, "big")
        )
    return raw.hex()


def is_valid_id(value) -> bool:
    return isinstance(value, str) and bool(_ID_PATTERN.match(value))


class DocumentId(str):
    """Identifiant déjà validé (toujours en minuscules)."""

    @classmethod
    def parse(cls, value: str, operation: Operation) -> "DocumentId":
        if not is_valid_id(value):
            raise InvalidIdError(value, operation)
        return cls(value.lower())

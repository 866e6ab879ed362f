# consultants/store/loader.py

import json
import logging
from typing import List, Optional

import anyio
from pydantic import TypeAdapter

from consultants import config
from consultants.models.people import Person

logger = logging.getLogger(__name__)

_people_adapter = TypeAdapter(List[Person])


async def load_people() -> List[Person]:
    """
    Read and parse the people data file. Nothing is cached: every call hits the disk.

    Raises OSError when the file can't be read, json.JSONDecodeError when it
    isn't JSON and pydantic.ValidationError when it isn't a list of objects.
    """
    path = anyio.Path(config.DATA_PATH)
    raw = await path.read_text(encoding="utf-8")
    people = _people_adapter.validate_python(json.loads(raw))
    logger.debug("Loaded %s people from %s", len(people), config.DATA_PATH)
    return people


def find_person(people: List[Person], name: str) -> Optional[Person]:
    # First exact match wins; duplicate names shadow later records.
    for person in people:
        if person.name == name:
            return person
    return None

# scripts/check_data.py
"""
Sanity-check the people data file before deploying it.

Usage:
    python -m scripts.check_data [path/to/people.json]
"""

import json
import logging
import sys
from collections import Counter
from pathlib import Path

from consultants import config

logger = logging.getLogger(__name__)

PERSON_KEYS = ("name", "shortIntro", "profilePicture", "projects")
PROJECT_KEYS = ("name", "shortDescription", "backgroundImage", "link")


def _missing(record, keys) -> list[str]:
    return [key for key in keys if key not in record]


def inspect_people(raw) -> dict:
    """
    Count people and projects and collect records that would render badly.

    raw is the parsed JSON document, expected to be a list of person objects.
    """
    if not isinstance(raw, list):
        raise ValueError(f"expected a JSON array of people, got {type(raw).__name__}")

    n_projects = 0
    n_problems = 0
    problem_examples = []
    names = Counter()

    def note(problem: str) -> None:
        nonlocal n_problems
        n_problems += 1
        if len(problem_examples) < 5:
            problem_examples.append(problem)

    for i, person in enumerate(raw):
        if not isinstance(person, dict):
            note(f"Person #{i} is not an object")
            continue

        name = person.get("name")
        if "name" in person:
            names[str(name)] += 1
            if not isinstance(name, str):
                note(f"Person #{i} name {name!r} is not a string")

        missing = _missing(person, PERSON_KEYS)
        if missing:
            note(f"Person #{i} ({name!r}) missing {', '.join(missing)}")

        projects = person.get("projects") or []
        if not isinstance(projects, list):
            note(f"Person #{i} ({name!r}) projects is not a list")
            continue

        for j, project in enumerate(projects):
            n_projects += 1
            if not isinstance(project, dict):
                note(f"Person #{i} project #{j} is not an object")
                continue
            missing = _missing(project, PROJECT_KEYS)
            if missing:
                note(f"Person #{i} project #{j} ({project.get('name')!r}) missing {', '.join(missing)}")

    duplicate_names = sorted(
        name for name, count in names.items() if count > 1
    )

    return {
        "n_people": len(raw),
        "n_projects": n_projects,
        "n_problems": n_problems,
        "problem_examples": problem_examples,
        "duplicate_names": duplicate_names,
    }


def main(argv=None) -> int:
    logging.basicConfig(
        level=logging.INFO,
        format="%(asctime)s [%(levelname)s] %(message)s",
    )
    argv = sys.argv[1:] if argv is None else argv
    path = Path(argv[0]) if argv else config.DATA_PATH

    try:
        raw = json.loads(path.read_text(encoding="utf-8"))
        stats = inspect_people(raw)
    except (OSError, ValueError) as e:
        logger.error("Could not check %s: %s", path, e)
        return 1

    logger.info("People:                %s", stats["n_people"])
    logger.info("Projects:              %s", stats["n_projects"])
    logger.info("Records with problems: %s", stats["n_problems"])

    for name in stats["duplicate_names"]:
        logger.warning("Duplicate name (only the first is reachable): %s", name)
    for example in stats["problem_examples"]:
        logger.warning("Problem: %s", example)

    return 0


if __name__ == "__main__":
    sys.exit(main())

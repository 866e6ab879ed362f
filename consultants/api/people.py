# consultants/api/people.py

import logging
from urllib.parse import unquote

from fastapi import APIRouter, HTTPException
from fastapi.responses import HTMLResponse, PlainTextResponse

from consultants.store.loader import find_person, load_people
from consultants.views.fragments import person_cards, project_cards
from consultants.views.templates import render_template

logger = logging.getLogger(__name__)

router = APIRouter(tags=["people"])


@router.get("/", response_class=HTMLResponse)
async def list_people():
    """
    Home page: one card per consultant, in data file order.
    """
    try:
        people = await load_people()
        html = await render_template("index.html", {"peopleList": person_cards(people)})
    except Exception:
        logger.exception("Failed to render the home page")
        return PlainTextResponse("Error loading the home page.", status_code=500)

    return HTMLResponse(html)


@router.get("/person/{name:path}", response_class=HTMLResponse)
async def get_person(name: str):
    """
    Detail page for the first consultant whose name matches exactly.
    """
    try:
        people = await load_people()
        person = find_person(people, unquote(name))

        if person is None:
            raise HTTPException(status_code=404, detail="Person not found")

        html = await render_template(
            "person.html",
            {"person": person, "projects": project_cards(person.projects)},
        )
    except HTTPException:
        raise
    except Exception:
        logger.exception("Failed to render the person page for %r", name)
        return PlainTextResponse("Error loading the person details.", status_code=500)

    return HTMLResponse(html)

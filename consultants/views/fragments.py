# consultants/views/fragments.py

from typing import Any, Iterable
from urllib.parse import quote

from markupsafe import Markup

from consultants.models.people import Person, Project

# Same characters JavaScript's encodeURIComponent leaves alone
_URI_COMPONENT_SAFE = "-_.!~*'()"

PERSON_CARD = Markup("""
        <section class="person-card">
          <img src="{picture}" alt="Profile picture of {name}" class="profile-pic">
          <div class="person-intro">
            <h2>{name}</h2>
            <p>{intro}</p>
            <a href="{path}" class="btn">View Details</a>
          </div>
        </section>
""")

PROJECT_CARD = Markup("""
        <div class="project-card" style="background-image: url('{background}');">
          <div class="project-content">
            <h3>{name}</h3>
            <p>{description}</p>
            <a href="{link}" target="_blank" class="btn-project">View Project</a>
          </div>
        </div>
""")


def _text(value: Any) -> str:
    return "" if value is None else str(value)


def person_path(name: Any) -> str:
    return "/person/" + quote(_text(name), safe=_URI_COMPONENT_SAFE)


def person_cards(people: Iterable[Person]) -> Markup:
    html = Markup("")
    for person in people:
        html += PERSON_CARD.format(
            picture=_text(person.profile_picture),
            name=_text(person.name),
            intro=_text(person.short_intro),
            path=person_path(person.name),
        )
    return html


def project_cards(projects: Any) -> Markup:
    html = Markup("")
    # Anything other than a list of projects renders no cards
    if not isinstance(projects, (list, tuple)):
        return html

    for project in projects:
        if not isinstance(project, Project):
            project = Project()
        html += PROJECT_CARD.format(
            background=_text(project.background_image),
            name=_text(project.name),
            description=_text(project.short_description),
            link=_text(project.link),
        )
    return html

from markupsafe import Markup

from consultants.models.people import Person, Project
from consultants.views.fragments import person_cards, person_path, project_cards
from tests.conftest import ADA


def test_person_cards_one_per_person_in_order():
    people = [Person.model_validate({"name": n}) for n in ("Zed", "Ada", "Mo")]

    html = person_cards(people)

    assert isinstance(html, Markup)
    assert html.count('class="person-card"') == 3
    assert html.index("<h2>Zed</h2>") < html.index("<h2>Ada</h2>") < html.index("<h2>Mo</h2>")


def test_person_card_contents():
    html = person_cards([Person.model_validate(ADA)])

    assert '<img src="/img/ada.png" alt="Profile picture of Ada"' in html
    assert "<p>Engineer</p>" in html
    assert 'href="/person/Ada"' in html


def test_person_path_encodes_like_uri_component():
    assert person_path("Ada Lovelace") == "/person/Ada%20Lovelace"
    assert person_path("a/b?c") == "/person/a%2Fb%3Fc"
    assert person_path("Zoë") == "/person/Zo%C3%AB"
    assert person_path("it's (ok)") == "/person/it's%20(ok)"


def test_person_cards_escape_data():
    html = person_cards([Person.model_validate({"name": '<img onerror="x">'})])

    assert "<img onerror" not in html
    assert "&lt;img onerror=&#34;x&#34;&gt;" in html


def test_empty_inputs_give_empty_markup():
    assert person_cards([]) == ""
    assert project_cards([]) == ""
    assert project_cards(None) == ""


def test_project_cards_in_order():
    projects = [
        Project.model_validate({"name": "One", "link": "http://one"}),
        Project.model_validate({"name": "Two", "link": "http://two"}),
    ]

    html = project_cards(projects)

    assert html.count('class="project-card"') == 2
    assert html.index("<h3>One</h3>") < html.index("<h3>Two</h3>")
    assert 'href="http://two" target="_blank"' in html


def test_project_card_contents():
    [project] = Person.model_validate(ADA).projects

    html = project_cards([project])

    assert "url('/img/x.png')" in html
    assert "<h3>X</h3>" in html
    assert "<p>d</p>" in html


def test_missing_project_fields_render_empty():
    html = project_cards([Project.model_validate({})])

    assert "<h3></h3>" in html
    assert 'href=""' in html


def test_non_string_fields_are_coerced():
    html = person_cards([Person.model_validate({"name": 7, "shortIntro": 42})])

    assert "<h2>7</h2>" in html
    assert "<p>42</p>" in html
    assert 'href="/person/7"' in html


def test_project_cards_ignore_non_list_input():
    assert project_cards("oops") == ""
    assert project_cards({"name": "X"}) == ""


def test_non_object_projects_render_empty_cards():
    person = Person.model_validate({"name": "Ada", "projects": [{"name": "X"}, "junk"]})

    html = project_cards(person.projects)

    assert html.count('class="project-card"') == 2
    assert html.index("<h3>X</h3>") < html.index("<h3></h3>")

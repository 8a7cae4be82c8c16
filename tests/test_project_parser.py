"""Tests for the project state machine and URL routing."""

from resume_extractor.core.project_parser import (
    find_url,
    looks_like_project_title,
    parse_projects,
)


def test_github_url_goes_to_github_slot():
    projects = parse_projects(["My App", "https://github.com/me/app"])

    assert len(projects) == 1
    assert projects[0].name == "My App"
    assert projects[0].github == "https://github.com/me/app"
    assert projects[0].link == ""


def test_key_value_cues():
    lines = [
        "Habit Tracker",
        "A small app for tracking habits.",
        "* Built offline sync with service workers",
        "Tech: React, Node.js, socket.io",
        "Live: habits.dev",
        "Repo: me/habits",
    ]
    project = parse_projects(lines)[0]

    assert project.description == "A small app for tracking habits. Built offline sync with service workers"
    assert project.technologies == ["React", "Node.js", "socket.io"]
    assert project.link == "https://habits.dev"
    assert project.github == "https://github.com/me/habits"


def test_plain_url_fills_link_first():
    projects = parse_projects(["Portfolio Site", "https://jane.example.com"])
    assert projects[0].link == "https://jane.example.com"
    assert projects[0].github == ""


def test_demo_hint_routes_to_link():
    projects = parse_projects(["Chat Server", "Demo https://chat.example.io", "Code https://gitlab.com/me/chat"])

    assert projects[0].link == "https://chat.example.io"
    assert projects[0].github == "https://gitlab.com/me/chat"


def test_multiple_projects_keep_their_own_fields():
    lines = [
        "Budget Planner",
        "Personal finance tool for monthly budgets.",
        "Technologies: Python, Flask",
        "Weather Dashboard",
        "Shows forecasts from public APIs.",
        "Stack: Vue, Flask",
    ]
    projects = parse_projects(lines)

    assert [p.name for p in projects] == ["Budget Planner", "Weather Dashboard"]
    assert projects[0].technologies == ["Python", "Flask"]
    assert projects[1].technologies == ["Vue", "Flask"]
    assert projects[1].description == "Shows forecasts from public APIs."


def test_duplicate_technologies_are_dropped():
    project = parse_projects(["Shop Backend", "Tech: Django, Redis", "Tools: Redis, Docker"])[0]
    assert project.technologies == ["Django", "Redis", "Docker"]


def test_lines_before_first_title_are_ignored():
    assert parse_projects([]) == []
    assert parse_projects(["* stray bullet line"]) == []


def test_find_url():
    assert find_url("see https://example.com/x.") == "https://example.com/x"
    assert find_url("Live at myapp.io") == "https://myapp.io"
    assert find_url("Built with Node.js/Express") == ""
    assert find_url("mail me at jane@example.com") == ""


def test_project_title_shape():
    assert looks_like_project_title("Habit Tracker")
    assert looks_like_project_title("Clone of the Reddit Frontend")
    assert not looks_like_project_title("Uses a queue to batch writes")
    assert not looks_like_project_title("Tech: React")
    assert not looks_like_project_title("https://github.com/me/app")
    # The first project title may be lowercase
    assert looks_like_project_title("my side project", strict=False)

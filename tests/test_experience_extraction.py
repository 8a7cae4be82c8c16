"""Tests for the experience state machine."""

from resume_extractor.core.dates import looks_like_dates, parse_date_range, remove_dates
from resume_extractor.core.experience_parser import (
    looks_like_job_title,
    parse_experience,
    split_company_location,
)


def test_title_company_dates_bullets():
    lines = [
        "Software Engineer",
        "Acme Corp",
        "2020 - 2023",
        "* Built scalable APIs",
        "* Led a team of 4",
    ]
    jobs = parse_experience(lines)

    assert len(jobs) == 1
    job = jobs[0]
    assert job.position == "Software Engineer"
    assert job.company == "Acme Corp"
    assert job.start_date == "2020"
    assert job.end_date == "2023"
    assert job.current is False
    assert job.responsibilities == ["Built scalable APIs", "Led a team of 4"]


def test_present_marks_current_role():
    jobs = parse_experience(["Senior Developer", "TechCo", "2021 - Present"])

    assert len(jobs) == 1
    assert jobs[0].current is True
    assert jobs[0].start_date == "2021"
    assert jobs[0].end_date == ""


def test_multiple_jobs_in_order():
    lines = [
        "Senior Developer",
        "TechCo",
        "Jan 2021 - Present",
        "* Migrated the monolith to services",
        "Junior Developer",
        "StartupX",
        "2018 - 2020",
        "* Wrote the first test suite",
    ]
    jobs = parse_experience(lines)

    assert [j.position for j in jobs] == ["Senior Developer", "Junior Developer"]
    assert [j.company for j in jobs] == ["TechCo", "StartupX"]
    assert jobs[0].current and not jobs[1].current
    assert jobs[1].responsibilities == ["Wrote the first test suite"]


def test_title_and_company_on_one_line():
    jobs = parse_experience(["Software Engineer at Acme Corp", "Jan 2020 - Present"])

    assert jobs[0].position == "Software Engineer"
    assert jobs[0].company == "Acme Corp"
    assert jobs[0].current is True


def test_inline_dates_on_title_line():
    jobs = parse_experience(["Data Analyst | Globex 2018 - 2020", "* Built weekly revenue dashboards"])

    assert jobs[0].position == "Data Analyst"
    assert jobs[0].company == "Globex"
    assert (jobs[0].start_date, jobs[0].end_date) == ("2018", "2020")


def test_company_with_location():
    jobs = parse_experience(["Backend Engineer", "Acme Corp, Austin, TX", "2019 - 2021"])

    assert jobs[0].company == "Acme Corp"
    assert jobs[0].location == "Austin, TX"


def test_short_responsibilities_are_dropped():
    jobs = parse_experience(["Software Engineer", "Acme", "* Did QA", "* Owned the release process"])
    assert jobs[0].responsibilities == ["Owned the release process"]


def test_bullets_before_first_title_are_ignored():
    jobs = parse_experience(["* Orphan bullet with no job", "Software Engineer", "Acme"])

    assert len(jobs) == 1
    assert jobs[0].responsibilities == []


def test_bullet_with_role_word_does_not_open_a_job():
    lines = ["Software Engineer", "Acme", "* Mentored two junior engineers on the team"]
    jobs = parse_experience(lines)

    assert len(jobs) == 1
    assert jobs[0].responsibilities == ["Mentored two junior engineers on the team"]


def test_continuation_line_is_a_responsibility():
    jobs = parse_experience(["Software Engineer", "Acme", "2020 - 2021", "Maintained CI pipelines for six teams."])
    assert jobs[0].responsibilities == ["Maintained CI pipelines for six teams."]


def test_no_title_means_no_jobs():
    assert parse_experience(["Acme Corp", "2020 - 2023", "* Built things for people"]) == []
    assert parse_experience([]) == []


def test_job_title_shape():
    assert looks_like_job_title("Senior Developer")
    assert looks_like_job_title("Product Manager at Initech")
    assert not looks_like_job_title("* Senior Developer")
    assert not looks_like_job_title("Worked closely with the engineering manager.")
    assert not looks_like_job_title("International Trade")


def test_split_company_location():
    assert split_company_location("Acme Corp | Remote") == ("Acme Corp", "Remote")
    assert split_company_location("Acme Corp, Berlin, Germany") == ("Acme Corp", "Berlin, Germany")
    assert split_company_location("Smith, Jones and Partners LLP") == ("Smith, Jones and Partners LLP", "")


def test_date_helpers():
    assert looks_like_dates("2020 - 2023")
    assert looks_like_dates("Mar 2019 to Present")
    assert looks_like_dates("03/2019 - 05/2021")
    assert looks_like_dates("2019")
    assert looks_like_dates("Jun 2022 - Currently")
    assert not looks_like_dates("Acme Corp")

    assert parse_date_range("Jan 2020 - Mar 2022") == ("2020", "2022", False)
    assert parse_date_range("2021 - current") == ("2021", "", True)
    assert parse_date_range("2021 - Currently") == ("2021", "", True)
    assert parse_date_range("sometime") == ("", "", False)

    assert remove_dates("Engineer (2019 - 2021)") == "Engineer"
    assert remove_dates("Engineer 2021 - Currently") == "Engineer"


def test_currently_marks_current_role():
    jobs = parse_experience(["Senior Developer", "TechCo", "2021 - Currently"])

    assert jobs[0].start_date == "2021"
    assert jobs[0].end_date == ""
    assert jobs[0].current is True
    assert jobs[0].responsibilities == []

"""Shared fixtures: sample content, the page shell and a laid-out headless environment."""

import copy
import json
import sys

import pytest
from loguru import logger

from folio.contexts.navigation.environment import HeadlessEnvironment
from folio.contexts.rendering.dom import DomDocument
from folio.utils.config import SITE_ROOT, load_settings

SECTION_HEIGHT = 1000

SAMPLE_DOCUMENT = {
    "about": {
        "name": "Ada King Lovelace",
        "title": "Analyst & Programmer",
        "summary": "Writes notes on <engines> & their uses.",
        "location": "London",
        "email": "ada@example.com",
        "links": {
            "github": "https://github.com/ada",
            "linkedin": "https://linkedin.com/in/ada",
        },
    },
    "experience": [
        {
            "role": "QA Engineer",
            "company": "Analytical Engines Ltd",
            "start": "2020",
            "end": "Present",
            "highlights": ["Wrote the first test plan", "Automated regression runs"],
            "stack": ["Python", "pytest"],
        },
        {
            "role": "Intern",
            "company": "Difference Co",
            "start": "2019",
            "end": "2020",
            "highlights": ["Kept the punch cards in order"],
            "stack": ["Bash"],
        },
    ],
    "education": [
        {
            "degree": "Master of Science",
            "field": "Mathematics",
            "school": "University of London",
            "start": "2017",
            "end": "2019",
            "notes": ["Number Theory", "Logic"],
        },
        {
            "degree": "Bachelor of Arts",
            "school": "Home Tutoring",
            "start": "2013",
            "end": "2017",
        },
    ],
    "projects": [
        {
            "name": "Test Automation Suite",
            "description": "Regression harness",
            "stack": ["Python", "Selenium"],
            "links": {"github": "https://github.com/ada/suite"},
        },
        {
            "name": "Terraform Infra",
            "description": "Modules",
            "stack": ["Terraform"],
            "links": {"github": "https://github.com/ada/infra", "demo": "https://infra.example.com"},
        },
        {
            "name": "Random Tool",
            "description": "Misc",
            "stack": [],
            "links": {},
        },
    ],
    "certifications": [
        {"name": "CompTIA Security+", "issuer": "CompTIA", "year": 2022},
        {"name": "Azure Fundamentals", "issuer": "Microsoft", "year": "2021"},
    ],
    "hobbies": ["Poetry", "Horse riding"],
}


@pytest.fixture(autouse=True)
def reset_loguru():
    """CLI tests reconfigure loguru sinks; restore a plain stderr sink afterwards."""
    yield
    logger.remove()
    logger.add(sys.stderr, level="DEBUG")


@pytest.fixture
def log_messages():
    """Collect formatted loguru messages emitted during the test."""
    messages = []
    handler_id = logger.add(lambda message: messages.append(str(message)), format="{level} {message}")
    yield messages
    logger.remove(handler_id)


@pytest.fixture
def sample_document():
    return copy.deepcopy(SAMPLE_DOCUMENT)


@pytest.fixture
def content_file(tmp_path, sample_document):
    """Sample content written as a JSON file."""
    path = tmp_path / "data.json"
    path.write_text(json.dumps(sample_document), encoding="utf-8")
    return path


@pytest.fixture
def settings():
    return load_settings()


@pytest.fixture
def page_shell():
    return (SITE_ROOT / "index.html").read_text(encoding="utf-8")


@pytest.fixture
def document(page_shell):
    return DomDocument(page_shell)


@pytest.fixture
def environment():
    return HeadlessEnvironment(viewport_height=800)


@pytest.fixture
def laid_out(document, environment):
    """Stack every section of the page shell, SECTION_HEIGHT pixels each."""
    environment.stack(document.query_all("section[id]"), SECTION_HEIGHT)
    return document, environment

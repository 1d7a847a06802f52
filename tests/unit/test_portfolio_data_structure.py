"""Unit tests for the content model and the fallback document."""

import dataclasses

import pytest

from folio.contexts.content.defaults import (
    FALLBACK_DOCUMENT,
    get_fallback_content,
    get_fallback_document,
)
from folio.contexts.content.exceptions import InvalidContentError
from folio.contexts.content.portfolio_data_structure import (
    Certification,
    Degree,
    Job,
    PortfolioContent,
)


@pytest.mark.unit
def test_from_dict_preserves_order(sample_document):
    content = PortfolioContent.from_dict(sample_document)

    assert [job.role for job in content.experience] == ["QA Engineer", "Intern"]
    assert [p.name for p in content.projects] == [
        "Test Automation Suite",
        "Terraform Infra",
        "Random Tool",
    ]
    assert content.hobbies == ("Poetry", "Horse riding")


@pytest.mark.unit
def test_lists_are_tuples(sample_document):
    content = PortfolioContent.from_dict(sample_document)

    assert isinstance(content.experience, tuple)
    assert isinstance(content.experience[0].highlights, tuple)
    assert isinstance(content.projects[0].stack, tuple)


@pytest.mark.unit
def test_content_is_read_only(sample_document):
    content = PortfolioContent.from_dict(sample_document)

    with pytest.raises(dataclasses.FrozenInstanceError):
        content.about.name = "Someone Else"
    with pytest.raises(dataclasses.FrozenInstanceError):
        content.experience[0].role = "CEO"


@pytest.mark.unit
def test_missing_fields_get_defaults():
    content = PortfolioContent.from_dict({"experience": [{}], "education": [{"degree": "BSc"}]})

    assert content.about.name == ""
    assert content.about.links.github is None
    assert content.experience[0] == Job()
    assert content.education[0] == Degree(degree="BSc")
    assert content.education[0].field is None
    assert content.education[0].notes == ()
    assert content.projects == ()
    assert content.hobbies == ()


@pytest.mark.unit
def test_scalars_coerced_to_text():
    content = PortfolioContent.from_dict(
        {"certifications": [{"name": "CC", "issuer": "ISC2", "year": 2023}]}
    )
    assert content.certifications[0] == Certification(name="CC", issuer="ISC2", year="2023")


@pytest.mark.unit
def test_empty_optional_links_are_none():
    content = PortfolioContent.from_dict({"projects": [{"name": "X", "links": {"github": ""}}]})
    assert content.projects[0].links.github is None
    assert content.projects[0].links.demo is None


@pytest.mark.unit
@pytest.mark.parametrize(
    "document",
    [
        ["not", "an", "object"],
        {"experience": ["QA Engineer"]},
        {"experience": {"role": "QA"}},
        {"about": "Ada"},
        {"projects": [{"name": "X", "stack": "Python"}]},
        {"hobbies": "Chess"},
    ],
)
def test_wrong_shape_raises(document):
    with pytest.raises(InvalidContentError):
        PortfolioContent.from_dict(document)


@pytest.mark.unit
def test_invalid_content_error_is_value_error():
    assert issubclass(InvalidContentError, ValueError)


@pytest.mark.unit
def test_to_dict_round_trip(sample_document):
    content = PortfolioContent.from_dict(sample_document)
    assert PortfolioContent.from_dict(content.to_dict()) == content
    assert content.to_dict()["hobbies"] == ["Poetry", "Horse riding"]


@pytest.mark.unit
def test_fallback_content():
    content = get_fallback_content()

    assert content.about.name == "Jubin Raj Nirmal"
    assert content.about.title == "Software Engineer & QA Developer"
    assert content.about.location == "Canada"
    assert content.about.email == "contact@jubinrajnirmal.com"
    assert content.about.links.github
    assert content.about.links.linkedin
    assert content.experience == ()
    assert content.education == ()
    assert content.projects == ()
    assert content.certifications == ()
    assert content.hobbies == ()


@pytest.mark.unit
def test_fallback_document_copy_is_independent():
    document = get_fallback_document()
    document["about"]["name"] = "Changed"
    assert FALLBACK_DOCUMENT["about"]["name"] == "Jubin Raj Nirmal"

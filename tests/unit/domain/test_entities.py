import pytest
from prd_extractor.domain.entities import ManagedTestCase, Phase, TestCaseDraft

pytestmark = pytest.mark.unit


def test_phase_to_dict():
    assert Phase("Phase 1", "body").to_dict() == {"name": "Phase 1", "snippet": "body"}


def test_draft_from_mapping_accepts_camel_case():
    draft = TestCaseDraft.from_mapping(
        {
            "id": "TC-1",
            "title": "Login",
            "testSteps": ["open", "submit"],
            "expectedResult": "logged in",
        }
    )

    assert draft.id == "TC-1"
    assert draft.steps == ["open", "submit"]
    assert draft.expected_result == "logged in"
    assert draft.priority is None


def test_draft_from_mapping_wraps_single_step_string():
    draft = TestCaseDraft.from_mapping({"steps": "do it", "expected_result": ""})

    assert draft.steps == ["do it"]
    assert draft.expected_result is None


def test_managed_test_case_to_dict_uses_camel_case():
    case = ManagedTestCase(
        id="TC1",
        title="Login",
        module="Auth",
        priority="High",
        status="Not Run",
        preconditions="N/A",
        test_steps=["open"],
        expected_result="ok",
        last_updated_by="qa@example.com",
        last_updated_by_uid="AI_GENERATED",
        source="PRD",
        phase="Phase 1",
        repo_id="repo-1",
    )

    data = case.to_dict()

    assert data["testSteps"] == ["open"]
    assert data["expectedResult"] == "ok"
    assert data["lastUpdatedByUid"] == "AI_GENERATED"
    assert data["repoId"] == "repo-1"
    assert data["createdAt"] == case.created_at.isoformat()

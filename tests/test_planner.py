"""Unit tests for the planner module."""
import pytest

from prepmate.errors import PlanGenerationError, PlanValidationError
from prepmate.knowledge import KnowledgeSnippet
from prepmate.planner import (
    EMPTY_KNOWLEDGE_MESSAGE,
    FALLBACK_PLAN_TEXT,
    MISSING_INPUTS_MESSAGE,
    StudyPlan,
    StudyPlanGenerator,
    build_plan_prompt,
    format_plan_sources,
    validate_plan_request,
)


class TestPlanContext:
    """Tests for plan prompt assembly."""

    def test_single_source_block(self, notes_snippet):
        """Test the block format for a single note."""
        assert format_plan_sources([notes_snippet]) == "--- Source: Notes ---\nX"

    def test_blocks_separated_by_blank_line(self, sample_knowledge_base):
        """Test that blocks are separated by a blank line."""
        blocks = format_plan_sources(sample_knowledge_base)
        assert blocks == (
            "--- Source: System Design ---\nConsistent hashing spreads keys across nodes."
            "\n\n"
            "--- Source: Python ---\nThe GIL serializes bytecode execution."
        )

    def test_prompt_embeds_inputs_verbatim(self, notes_snippet):
        """Test that role, JD and notes appear verbatim."""
        prompt = build_plan_prompt("Backend Engineer", "Build APIs", [notes_snippet])

        assert "--- Source: Notes ---\nX" in prompt
        assert "Backend Engineer" in prompt
        assert "Build APIs" in prompt

    def test_prompt_lists_requirements(self, notes_snippet):
        """Test that the prompt lists the plan requirements."""
        prompt = build_plan_prompt("Backend Engineer", "Build APIs", [notes_snippet])

        assert "Identify gaps" in prompt
        assert "Organize the KB" in prompt
        assert "summarize the key points" in prompt
        assert "Case Study" in prompt
        assert "Markdown" in prompt

    def test_braces_in_user_text_survive(self):
        """Test that braces in user text are not treated as placeholders."""
        snippet = KnowledgeSnippet(title="JSON", content='{"key": "{value}"}')
        prompt = build_plan_prompt("Role {x}", "JD with {braces}", [snippet])

        assert '{"key": "{value}"}' in prompt
        assert "Role {x}" in prompt
        assert "JD with {braces}" in prompt


class TestValidatePlanRequest:
    """Tests for plan input validation."""

    def test_empty_knowledge_base(self):
        """Test that an empty knowledge base is rejected."""
        with pytest.raises(PlanValidationError) as exc_info:
            validate_plan_request("Backend Engineer", "Build APIs", [])
        assert exc_info.value.user_message == EMPTY_KNOWLEDGE_MESSAGE

    @pytest.mark.parametrize("role,jd", [("", "Build APIs"), ("Backend Engineer", ""), ("  ", " ")])
    def test_missing_role_or_jd(self, role: str, jd: str, notes_snippet):
        """Test that a blank role or JD is rejected."""
        with pytest.raises(PlanValidationError) as exc_info:
            validate_plan_request(role, jd, [notes_snippet])
        assert exc_info.value.user_message == MISSING_INPUTS_MESSAGE

    def test_missing_inputs_reported_before_empty_knowledge(self):
        """Test that missing inputs are reported first."""
        with pytest.raises(PlanValidationError) as exc_info:
            validate_plan_request("", "", [])
        assert exc_info.value.user_message == MISSING_INPUTS_MESSAGE

    def test_valid_request_passes(self, notes_snippet):
        """Test that complete inputs pass validation."""
        validate_plan_request("Backend Engineer", "Build APIs", [notes_snippet])


class TestStudyPlanGenerator:
    """Tests for StudyPlanGenerator."""

    @pytest.mark.asyncio
    async def test_returns_model_markdown_unmodified(self, make_llm, notes_snippet):
        """Test that the plan is the model's markdown unmodified."""
        markdown = "# Plan\n\n## Gaps\n- gRPC  \n"
        llm = make_llm(plan_text=markdown)
        generator = StudyPlanGenerator(llm)

        result = await generator.generate("Backend Engineer", "Build APIs", [notes_snippet])

        assert result == markdown

    @pytest.mark.asyncio
    async def test_issues_exactly_one_request_with_thinking(self, make_llm, notes_snippet):
        """Test that one request is made with model, budget and instruction."""
        llm = make_llm()
        generator = StudyPlanGenerator(llm, model="plan-model", thinking_budget=2048)

        await generator.generate("Backend Engineer", "Build APIs", [notes_snippet])

        assert len(llm.generate_calls) == 1
        call = llm.generate_calls[0]
        assert call["model"] == "plan-model"
        assert call["thinking_budget"] == 2048
        assert call["system_instruction"] == "You are a precise and structured educational assistant."
        assert "--- Source: Notes ---\nX" in call["prompt"]

    @pytest.mark.asyncio
    async def test_empty_response_returns_fallback(self, make_llm, notes_snippet):
        """Test that an empty reply gives the fallback text."""
        llm = make_llm(plan_text="")
        generator = StudyPlanGenerator(llm)

        result = await generator.generate("Backend Engineer", "Build APIs", [notes_snippet])

        assert result == FALLBACK_PLAN_TEXT == "Failed to generate plan."

    @pytest.mark.asyncio
    async def test_transport_failure_raises_generation_error(self, make_llm, notes_snippet):
        """Test that transport errors are wrapped and chained."""
        cause = ConnectionError("unreachable")
        llm = make_llm(generate_error=cause)
        generator = StudyPlanGenerator(llm)

        with pytest.raises(PlanGenerationError) as exc_info:
            await generator.generate("Backend Engineer", "Build APIs", [notes_snippet])

        assert exc_info.value.__cause__ is cause
        assert len(llm.generate_calls) == 1

    @pytest.mark.asyncio
    async def test_debug_callback_receives_events(self, make_llm, notes_snippet):
        """Test that the generator reports progress to the debug callback."""
        events = []
        generator = StudyPlanGenerator(make_llm())
        generator.set_debug_callback(lambda level, component, message: events.append((level, component)))

        await generator.generate("Backend Engineer", "Build APIs", [notes_snippet])

        assert ("info", "LLM") in events
        assert ("debug", "Planner") in events

    @pytest.mark.asyncio
    async def test_token_usage_logged(self, make_llm, notes_snippet):
        """Test that plan token usage is reported to the debug callback."""
        events = []
        generator = StudyPlanGenerator(make_llm(usage={"total_tokens": 1234}))
        generator.set_debug_callback(lambda level, component, message: events.append(message))

        await generator.generate("Backend Engineer", "Build APIs", [notes_snippet])

        assert any("Token usage" in message and "1234" in message for message in events)


class TestStudyPlan:
    """Tests for StudyPlan model."""

    def test_plan_fields(self):
        """Test creating a study plan."""
        plan = StudyPlan(role="SRE", job_description="Keep it up", generated_plan="# Plan")
        assert plan.role == "SRE"
        assert plan.job_description == "Keep it up"
        assert plan.generated_plan == "# Plan"

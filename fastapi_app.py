#!/usr/bin/env python3
"""
FastAPI Application for the Prompt Template Builder

This FastAPI application exposes the task analyzer and the prompt template
generator as REST APIs.

Endpoints:
- POST /api/analyze-task: Recommend a model for a free-text task description
- POST /api/generate-task-prompt: Generate a prompt pair for a described task
- POST /api/generate-prompt: Generate a prompt pair for model/task type/tone
- GET /api/catalog: Supported models, task types, tones and model guidance
- GET /health: Health check endpoint
"""

import time
import logging
from contextlib import asynccontextmanager
from typing import Optional, Dict, Any, List

from fastapi import APIRouter, FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from pydantic import BaseModel, ConfigDict, Field, ValidationInfo, field_validator
import uvicorn

from catalogs import create_guidance_catalog, create_tone_catalog
from core.data_models import ModelIdentifier, PromptRequest, TaskComplexity, TaskType, Tone
from gateway.completion_gateway import CompletionGateway, CompletionGatewayError
from llm_providers.base_provider import AuthenticationError, QuotaExceededError
from main import load_config, create_gateway
from prompting.request_builder import PromptRequestBuilder, PromptRequestError
from routers.task_analyzer import TaskAnalyzer

# Configure logging
logging.basicConfig(level=logging.INFO)
logger = logging.getLogger(__name__)

API_VERSION = "1.0.0"
GENERATION_FAILED_MESSAGE = "Failed to generate prompt. Please try again."


# Pydantic Models for API Request/Response
class ApiModel(BaseModel):
    """Base model accepting both camelCase aliases and field names"""
    model_config = ConfigDict(populate_by_name=True)


class GeneratePromptRequest(ApiModel):
    """Request model for the generate-prompt endpoint"""
    model: ModelIdentifier = Field(..., description="Target model the prompt pair is written for")
    task_type: TaskType = Field(..., alias="taskType", description="Task category, or 'other' for a free-text task")
    tone: Tone = Field(..., description="Stylistic tone of the generated prompts")
    custom_prompt: Optional[str] = Field(None, alias="customPrompt", max_length=10000, validate_default=True,
                                         description="Existing prompt to rewrite, or the task description for 'other'")

    @field_validator("custom_prompt")
    @classmethod
    def require_custom_prompt_for_other(cls, value: Optional[str], info: ValidationInfo) -> Optional[str]:
        if info.data.get("task_type") == TaskType.OTHER and not (value and value.strip()):
            raise ValueError("Please describe your task when selecting 'Other'")
        return value


class TaskAnalysisRequest(ApiModel):
    """Request model for the analyze-task endpoint"""
    task_description: str = Field(..., alias="taskDescription", min_length=10, max_length=10000,
                                  description="Free-text description of the task")


class TaskPromptRequest(ApiModel):
    """Request model for the generate-task-prompt endpoint"""
    task_description: str = Field(..., alias="taskDescription", min_length=10, max_length=10000)
    selected_model: ModelIdentifier = Field(..., alias="selectedModel")
    tone: Tone


class PromptResponse(ApiModel):
    """Prompt pair returned by the completion API"""
    system_prompt: str = Field(..., alias="systemPrompt")
    user_prompt: str = Field(..., alias="userPrompt")
    formatting_tips: List[str] = Field(..., alias="formattingTips")
    behavioral_notes: List[str] = Field(..., alias="behavioralNotes")


class ModelAlternativeResponse(ApiModel):
    model: ModelIdentifier
    reason: str
    pros: List[str]
    cons: List[str]


class ModelRecommendationResponse(ApiModel):
    """Response model for the analyze-task endpoint"""
    recommended_model: ModelIdentifier = Field(..., alias="recommendedModel")
    confidence: float = Field(..., ge=0.0, le=1.0)
    reasoning: str
    task_complexity: TaskComplexity = Field(..., alias="taskComplexity")
    alternatives: List[ModelAlternativeResponse] = Field(..., max_length=3)


class CatalogResponse(ApiModel):
    """Response model for the catalog endpoint"""
    models: List[str]
    task_types: List[str] = Field(..., alias="taskTypes")
    tones: List[str]
    guidance: Dict[str, Dict[str, Any]]


class HealthResponse(ApiModel):
    """Response model for health endpoint"""
    status: str
    timestamp: str
    version: str = API_VERSION
    credential_configured: bool = Field(..., alias="credentialConfigured")
    completion_model: str = Field(..., alias="completionModel")


# Errors raised while validating a defaulted field report the attribute name, not the alias
_FIELD_ALIASES = {
    name: info.alias
    for model in (GeneratePromptRequest, TaskAnalysisRequest, TaskPromptRequest)
    for name, info in model.model_fields.items()
    if info.alias
}


def _format_validation_errors(errors) -> List[Dict[str, str]]:
    """Flatten pydantic errors into {field, message, type} entries keyed by JSON field name"""
    formatted = []
    for error in errors:
        loc = [_FIELD_ALIASES.get(str(part), str(part)) for part in error.get("loc", ()) if part != "body"]
        formatted.append({
            "field": ".".join(loc),
            "message": error.get("msg", ""),
            "type": error.get("type", "")
        })
    return formatted


def _error_response(error: Exception) -> JSONResponse:
    """Convert a pipeline failure into a JSON error response"""
    if isinstance(error, PromptRequestError):
        return JSONResponse(status_code=400, content={
            "message": "Invalid input parameters",
            "errors": [{"field": error.field, "message": str(error), "type": "value_error"}]
        })
    if isinstance(error, AuthenticationError):
        return JSONResponse(status_code=401, content={"message": "OpenAI API key not configured or invalid"})
    if isinstance(error, QuotaExceededError):
        return JSONResponse(status_code=402, content={"message": "OpenAI API quota exceeded or billing issue"})
    if not isinstance(error, CompletionGatewayError):
        logger.exception("Unclassified failure during prompt generation", exc_info=error)
    return JSONResponse(status_code=500, content={"message": GENERATION_FAILED_MESSAGE, "error": str(error)})


# Application lifecycle management
@asynccontextmanager
async def lifespan(app: FastAPI):
    """Manage application startup and shutdown"""
    logger.info("Starting Prompt Template Builder service...")
    if not app.state.gateway.provider.has_credentials:
        logger.warning("No completion API key configured; generation endpoints will return 401")
    yield
    logger.info("Shutting down Prompt Template Builder service...")


router = APIRouter()


# API Endpoints

@router.get("/health", response_model=HealthResponse)
def health_check(request: Request):
    """Health check endpoint"""
    gateway: CompletionGateway = request.app.state.gateway
    return HealthResponse(
        status="healthy",
        timestamp=time.strftime("%Y-%m-%d %H:%M:%S UTC", time.gmtime()),
        credential_configured=gateway.provider.has_credentials,
        completion_model=gateway.model_name
    )


@router.get("/api/catalog", response_model=CatalogResponse)
def get_catalog(request: Request):
    """Supported models, task types and tones with per-model guidance"""
    guidance_catalog = request.app.state.guidance_catalog
    return CatalogResponse(
        models=[model.value for model in ModelIdentifier],
        task_types=[task_type.value for task_type in TaskType],
        tones=[tone.value for tone in Tone],
        guidance={model: guidance_catalog.lookup(model).to_dict() for model in guidance_catalog.models()}
    )


@router.post("/api/analyze-task", response_model=ModelRecommendationResponse)
def analyze_task(payload: TaskAnalysisRequest, request: Request):
    """Recommend a model for a free-text task description"""
    logger.info(f"Analyze request received: {payload.task_description[:100]}")
    try:
        recommendation = request.app.state.analyzer.analyze(payload.task_description)
    except Exception as e:
        logger.error(f"Task analysis failed: {e}")
        return JSONResponse(status_code=500, content={"message": "Failed to analyze task", "error": str(e)})
    return ModelRecommendationResponse(**recommendation.to_dict())


@router.post("/api/generate-task-prompt", response_model=PromptResponse)
def generate_task_prompt(payload: TaskPromptRequest, request: Request):
    """Generate a prompt pair for a described task and the chosen model"""
    logger.info(f"Task prompt request received (model={payload.selected_model.value}, tone={payload.tone.value})")
    try:
        builder: PromptRequestBuilder = request.app.state.builder
        instructions = builder.build_for_task(payload.task_description, payload.selected_model, payload.tone)
        result = request.app.state.gateway.complete(instructions.system_instruction, instructions.user_instruction)
    except Exception as e:
        logger.error(f"Task prompt generation failed: {e}")
        return _error_response(e)
    return PromptResponse(**result)


@router.post("/api/generate-prompt", response_model=PromptResponse)
def generate_prompt(payload: GeneratePromptRequest, request: Request):
    """Generate a prompt pair for model, task type and tone"""
    logger.info(
        f"Prompt request received (model={payload.model.value}, task={payload.task_type.value}, "
        f"tone={payload.tone.value}, custom_prompt={'yes' if payload.custom_prompt else 'no'})"
    )
    prompt_request = PromptRequest(
        model=payload.model,
        task_type=payload.task_type,
        tone=payload.tone,
        custom_prompt=payload.custom_prompt
    )
    try:
        instructions = request.app.state.builder.build(prompt_request)
        result = request.app.state.gateway.complete(instructions.system_instruction, instructions.user_instruction)
    except Exception as e:
        logger.error(f"Prompt generation failed: {e}")
        return _error_response(e)
    return PromptResponse(**result)


async def validation_exception_handler(request: Request, exc: RequestValidationError):
    """Report request validation failures as 400 with a field-level error list"""
    errors = _format_validation_errors(exc.errors())
    logger.info(f"Rejected invalid request to {request.url.path}: {errors}")
    return JSONResponse(status_code=400, content={"message": "Invalid input parameters", "errors": errors})


def create_app(config: Optional[Dict[str, Any]] = None,
               gateway: Optional[CompletionGateway] = None) -> FastAPI:
    """
    Build the FastAPI application.

    Catalogs, analyzer, builder and gateway are created once here and shared
    read-only by every request.

    Args:
        config: Output of main.load_config (loaded from disk/environment if omitted)
        gateway: Pre-built completion gateway (created from config if omitted)

    Returns:
        FastAPI: Configured application
    """
    app = FastAPI(
        title="Prompt Template Builder API",
        description="Model recommendation and prompt template generation for OpenAI models",
        version=API_VERSION,
        lifespan=lifespan
    )

    if gateway is None:
        gateway = create_gateway(config or load_config())

    guidance_catalog = create_guidance_catalog()
    tone_catalog = create_tone_catalog()

    app.state.guidance_catalog = guidance_catalog
    app.state.tone_catalog = tone_catalog
    app.state.analyzer = TaskAnalyzer()
    app.state.builder = PromptRequestBuilder(guidance_catalog, tone_catalog)
    app.state.gateway = gateway

    app.add_exception_handler(RequestValidationError, validation_exception_handler)
    app.include_router(router)
    return app


# FastAPI app instance
app = create_app()


if __name__ == "__main__":
    import os

    # Enable debug mode if DEBUG environment variable is set
    debug_mode = os.getenv("DEBUG", "false").lower() == "true"

    if debug_mode:
        logging.getLogger().setLevel(logging.DEBUG)
        logger.debug("Debug mode enabled")

    uvicorn.run(
        "fastapi_app:app",
        host="0.0.0.0",
        port=8000,
        reload=True,
        log_level="debug" if debug_mode else "info",
        access_log=True
    )

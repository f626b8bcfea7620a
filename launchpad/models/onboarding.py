"""Schema for the onboarding wizard state and its building blocks."""

from datetime import datetime
from typing import Literal, Optional

from pydantic import BaseModel, Field

ProjectType = Literal["web-app", "api-service", "mobile-app", "data-pipeline", "ml-model"]
Environment = Literal["development", "staging", "production"]
Language = Literal["typescript", "python", "java", "go", "rust"]
DataStore = Literal["none", "postgres", "mongodb", "redis", "dynamodb"]
TemplateType = Literal["infrastructure", "repository"]
Complexity = Literal["simple", "intermediate", "advanced"]
ValidationType = Literal["error", "warning"]
StepStatus = Literal["pending", "running", "completed", "failed"]


class User(BaseModel):
    """Identity returned by the (simulated) identity provider."""

    id: str
    name: str
    email: str
    avatar: Optional[str] = None
    role: str
    team: str
    provider: Optional[str] = Field(None, description="Display name of the issuing provider")


class ProjectConfig(BaseModel):
    """Project configuration assembled across several wizard steps.

    Every field is optional: the config is built by partial merges and is
    only checked as a whole on the Review step.
    """

    name: Optional[str] = None
    display_name: Optional[str] = None
    description: Optional[str] = None
    project_type: Optional[ProjectType] = None
    environment: Optional[Environment] = None
    language: Optional[Language] = None
    framework: Optional[str] = None
    data_store: Optional[DataStore] = None
    owner: Optional[str] = None
    team: Optional[str] = None
    tags: dict[str, str] = Field(default_factory=dict)
    budget: Optional[int] = None
    compliance: list[str] = Field(default_factory=list)


class Template(BaseModel):
    """Infrastructure or repository starter offered for selection."""

    id: str
    name: str
    description: str
    type: TemplateType
    category: str
    technologies: list[str] = Field(default_factory=list)
    complexity: Complexity
    estimated_time: str = Field(description="Human readable estimate, e.g. '15 minutes'")
    resources: list[str] = Field(default_factory=list)
    preview: Optional[str] = None


class ValidationResult(BaseModel):
    """Single review finding. Errors block provisioning, warnings do not."""

    field: str
    message: str
    type: ValidationType


class ProvisioningStep(BaseModel):
    """One unit of the simulated provisioning sequence."""

    id: str
    name: str
    status: StepStatus = "pending"
    message: Optional[str] = None
    details: Optional[str] = None
    start_time: Optional[datetime] = None
    end_time: Optional[datetime] = None


class CompletionData(BaseModel):
    """Result payload shown once provisioning has finished."""

    repository_url: str
    infrastructure_urls: list[str] = Field(default_factory=list)
    access_details: list[str] = Field(default_factory=list)
    next_steps: list[str] = Field(default_factory=list)


class OnboardingState(BaseModel):
    """Complete wizard state for one session."""

    current_step: int = 0
    user: Optional[User] = None
    project_config: ProjectConfig = Field(default_factory=ProjectConfig)
    selected_templates: list[Template] = Field(default_factory=list)
    validation_results: list[ValidationResult] = Field(default_factory=list)
    provisioning: list[ProvisioningStep] = Field(default_factory=list)
    is_complete: bool = False
    completion_data: Optional[CompletionData] = None

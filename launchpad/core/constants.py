"""Static catalogs shared by the wizard steps and the CLI."""

from dataclasses import dataclass

from launchpad.models import Template, User


@dataclass(frozen=True)
class ProviderMeta:
    """Metadata for an identity provider."""

    id: str
    display_name: str
    description: str
    category: str


@dataclass(frozen=True)
class OptionMeta:
    """A selectable choice rendered as a button or radio item."""

    id: str
    display_name: str
    description: str = ""


# Identity providers offered on the authentication step
PROVIDERS: list[ProviderMeta] = [
    ProviderMeta("github", "GitHub", "Developer authentication via GitHub OAuth", "Developer Tools"),
    ProviderMeta("aws-sso", "AWS SSO", "AWS Identity Center (formerly AWS SSO)", "AWS Native"),
    ProviderMeta("cognito", "Amazon Cognito", "AWS managed user authentication", "AWS Native"),
    ProviderMeta("azure-ad", "Azure AD", "Microsoft Azure Active Directory", "Enterprise"),
    ProviderMeta("google-workspace", "Google Workspace", "Google Workspace SSO", "Enterprise"),
    ProviderMeta("saml", "SAML 2.0", "Enterprise SAML identity provider", "Enterprise"),
]

# Quick lookup by provider ID
PROVIDER_MAP: dict[str, ProviderMeta] = {p.id: p for p in PROVIDERS}

# Provider used when an unknown ID is requested
DEFAULT_PROVIDER_ID = "github"

_AVATAR = "https://images.pexels.com/photos/{}/pexels-photo-{}.jpeg?auto=compress&cs=tinysrgb&w=150&h=150&dpr=2"

# Canonical identity returned by each provider
MOCK_USERS: dict[str, User] = {
    "github": User(
        id="1",
        name="Alex Chen",
        email="alex.chen@company.com",
        avatar=_AVATAR.format(774909, 774909),
        role="Senior Developer",
        team="Platform Engineering",
        provider="GitHub",
    ),
    "aws-sso": User(
        id="2",
        name="Sarah Johnson",
        email="sarah.johnson@company.com",
        avatar=_AVATAR.format(1239291, 1239291),
        role="DevOps Engineer",
        team="Infrastructure",
        provider="AWS SSO",
    ),
    "cognito": User(
        id="3",
        name="Michael Rodriguez",
        email="michael.rodriguez@company.com",
        avatar=_AVATAR.format(1222271, 1222271),
        role="Full Stack Developer",
        team="Product Engineering",
        provider="Amazon Cognito",
    ),
    "azure-ad": User(
        id="4",
        name="Emily Watson",
        email="emily.watson@company.com",
        avatar=_AVATAR.format(1181686, 1181686),
        role="Cloud Architect",
        team="Enterprise Architecture",
        provider="Azure AD",
    ),
    "google-workspace": User(
        id="5",
        name="David Kim",
        email="david.kim@company.com",
        avatar=_AVATAR.format(1043471, 1043471),
        role="Tech Lead",
        team="Mobile Development",
        provider="Google Workspace",
    ),
    "saml": User(
        id="6",
        name="Lisa Thompson",
        email="lisa.thompson@company.com",
        avatar=_AVATAR.format(1181424, 1181424),
        role="Security Engineer",
        team="Information Security",
        provider="SAML 2.0",
    ),
}

PROJECT_TYPES: list[OptionMeta] = [
    OptionMeta("web-app", "Web Application", "Frontend or full-stack web application"),
    OptionMeta("api-service", "API Service", "RESTful or GraphQL API service"),
    OptionMeta("mobile-app", "Mobile App", "iOS, Android, or cross-platform mobile app"),
    OptionMeta("data-pipeline", "Data Pipeline", "ETL, streaming, or batch data processing"),
    OptionMeta("ml-model", "ML Model", "Machine learning model or AI service"),
]

LANGUAGES: list[OptionMeta] = [
    OptionMeta("typescript", "TypeScript"),
    OptionMeta("python", "Python"),
    OptionMeta("java", "Java"),
    OptionMeta("go", "Go"),
    OptionMeta("rust", "Rust"),
]

# Framework choices depend on the selected language
FRAMEWORKS: dict[str, list[str]] = {
    "typescript": ["React", "Next.js", "Vue.js", "Angular", "Express.js", "Nest.js"],
    "python": ["FastAPI", "Django", "Flask", "Streamlit", "Jupyter"],
    "java": ["Spring Boot", "Quarkus", "Micronaut"],
    "go": ["Gin", "Echo", "Fiber"],
    "rust": ["Actix", "Rocket", "Axum"],
}

ENVIRONMENTS: list[OptionMeta] = [
    OptionMeta("development", "Development", "For development and testing"),
    OptionMeta("staging", "Staging", "Pre-production environment"),
    OptionMeta("production", "Production", "Live production environment"),
]

DATA_STORES: list[OptionMeta] = [
    OptionMeta("none", "None", "No database required"),
    OptionMeta("postgres", "PostgreSQL", "Relational database"),
    OptionMeta("mongodb", "MongoDB", "Document database"),
    OptionMeta("redis", "Redis", "In-memory cache"),
    OptionMeta("dynamodb", "DynamoDB", "NoSQL database"),
]

COMPLIANCE_OPTIONS: list[OptionMeta] = [
    OptionMeta("gdpr", "GDPR", "General Data Protection Regulation"),
    OptionMeta("hipaa", "HIPAA", "Health Insurance Portability and Accountability Act"),
    OptionMeta("sox", "SOX", "Sarbanes-Oxley Act"),
    OptionMeta("pci-dss", "PCI DSS", "Payment Card Industry Data Security Standard"),
]

# Tags applied to every provisioned resource
TAG_KEYS: list[str] = ["CostCenter", "Environment", "Project", "Team"]

_PREVIEW = "https://images.pexels.com/photos/{}/pexels-photo-{}.jpeg?auto=compress&cs=tinysrgb&w=300&h=200"

TEMPLATE_CATALOG: list[Template] = [
    Template(
        id="infra-basic-vpc",
        name="Basic VPC Infrastructure",
        description="Standard VPC setup with public/private subnets, NAT gateway, and security groups",
        type="infrastructure",
        category="Networking",
        technologies=["AWS VPC", "CloudFormation", "NAT Gateway"],
        complexity="simple",
        estimated_time="15 minutes",
        resources=[
            "VPC",
            "Subnets",
            "Internet Gateway",
            "NAT Gateway",
            "Route Tables",
            "Security Groups",
        ],
        preview=_PREVIEW.format(1181298, 1181298),
    ),
    Template(
        id="infra-serverless",
        name="Serverless Application Stack",
        description="Complete serverless infrastructure with Lambda, API Gateway, and DynamoDB",
        type="infrastructure",
        category="Serverless",
        technologies=["AWS Lambda", "API Gateway", "DynamoDB", "CloudWatch"],
        complexity="intermediate",
        estimated_time="25 minutes",
        resources=[
            "Lambda Functions",
            "API Gateway",
            "DynamoDB Table",
            "IAM Roles",
            "CloudWatch Logs",
        ],
        preview=_PREVIEW.format(1181677, 1181677),
    ),
    Template(
        id="repo-react-starter",
        name="React TypeScript Starter",
        description="Modern React application with TypeScript, Tailwind CSS, and testing setup",
        type="repository",
        category="Frontend",
        technologies=["React", "TypeScript", "Tailwind CSS", "Vite", "Jest"],
        complexity="simple",
        estimated_time="5 minutes",
        resources=[
            "Component Library",
            "CI/CD Pipeline",
            "Testing Framework",
            "Documentation",
        ],
        preview=_PREVIEW.format(1181263, 1181263),
    ),
    Template(
        id="repo-api-fastapi",
        name="FastAPI REST API",
        description="Production-ready FastAPI application with authentication, database, and documentation",
        type="repository",
        category="Backend",
        technologies=["FastAPI", "Python", "PostgreSQL", "Docker", "Pytest"],
        complexity="intermediate",
        estimated_time="10 minutes",
        resources=[
            "API Endpoints",
            "Authentication",
            "Database Models",
            "Docker Setup",
            "API Documentation",
        ],
        preview=_PREVIEW.format(1181244, 1181244),
    ),
    Template(
        id="infra-monitoring",
        name="Observability Stack",
        description="Comprehensive monitoring with CloudWatch, X-Ray, and alerting",
        type="infrastructure",
        category="Monitoring",
        technologies=["CloudWatch", "X-Ray", "SNS", "CloudTrail"],
        complexity="advanced",
        estimated_time="30 minutes",
        resources=[
            "CloudWatch Dashboards",
            "Alarms",
            "X-Ray Tracing",
            "Log Groups",
            "SNS Topics",
        ],
        preview=_PREVIEW.format(1181376, 1181376),
    ),
    Template(
        id="repo-cicd-pipeline",
        name="CI/CD Pipeline Template",
        description="GitHub Actions workflow with automated testing, building, and deployment",
        type="repository",
        category="DevOps",
        technologies=["GitHub Actions", "Docker", "AWS CodeDeploy", "Terraform"],
        complexity="advanced",
        estimated_time="20 minutes",
        resources=[
            "GitHub Workflows",
            "Build Scripts",
            "Deployment Configs",
            "Quality Gates",
        ],
        preview=_PREVIEW.format(1181467, 1181467),
    ),
]

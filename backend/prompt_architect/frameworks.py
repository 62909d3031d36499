# backend/prompt_architect/frameworks.py
"""
Prompting Framework Catalog

A framework is a named template of sections (e.g. Role / Action / Context /
Explanation) that a generated prompt should follow. The set is closed and
fixed at build time; catalog order is the order the UI displays.
"""

from dataclasses import dataclass, field
from enum import Enum
from typing import Dict, List, Optional


class FrameworkId(str, Enum):
    STANDARD = "standard"
    REASONING = "reasoning"
    RACE = "race"
    CARE = "care"
    APE = "ape"
    CREATE = "create"
    TAG = "tag"
    CREO = "creo"
    RISE = "rise"
    PAIN = "pain"
    COAST = "coast"
    ROSES = "roses"


@dataclass(frozen=True)
class FrameworkDefinition:
    id: FrameworkId
    name: str  # display name, used verbatim in the framework directive
    description: str
    fields: List[str] = field(default_factory=list)

    def to_dict(self) -> Dict:
        return {
            "id": self.id.value,
            "name": self.name,
            "description": self.description,
            "fields": list(self.fields),
        }


FRAMEWORK_CATALOG: List[FrameworkDefinition] = [
    FrameworkDefinition(
        id=FrameworkId.STANDARD,
        name="Standard Prompt – For general use prompt generation",
        description="For general use prompt generation",
    ),
    FrameworkDefinition(
        id=FrameworkId.REASONING,
        name="Reasoning Prompt – For reasoning tasks and complex problem solving",
        description="For reasoning tasks and complex problem solving",
    ),
    FrameworkDefinition(
        id=FrameworkId.RACE,
        name="Race [Role, Action, Context, Explanation] – Role-based responses",
        description="RACE Framework [Role, Action, Context, Explanation] – Role-based responses with structured instructions",
        fields=["Role", "Action", "Context", "Explanation"],
    ),
    FrameworkDefinition(
        id=FrameworkId.CARE,
        name="Care [Context, Action, Result, Example] – Helpful, real-world responses",
        description="CARE Framework [Context, Action, Result, Example] – Helpful, real-world responses with practical value",
        fields=["Context", "Action", "Result", "Example"],
    ),
    FrameworkDefinition(
        id=FrameworkId.APE,
        name="Ape [Action, Purpose, Execution] – Clear task execution",
        description="APE Framework [Action, Purpose, Execution] – Clear task execution with defined goals and outcomes",
        fields=["Action", "Purpose", "Execution"],
    ),
    FrameworkDefinition(
        id=FrameworkId.CREATE,
        name="Create [Character, Request, Examples, Adjustments, Type, Extras] – Guided task execution",
        description="CREATE Framework [Character, Request, Examples, Adjustments, Type, Extras] – Clear, specific & guided task execution",
        fields=["Character", "Request", "Examples", "Adjustments", "Type", "Extras"],
    ),
    FrameworkDefinition(
        id=FrameworkId.TAG,
        name="Tag [Task, Action, Goal] – Step-by-step tasks",
        description="TAG Framework [Task, Action, Goal] – Step-by-step tasks aimed at achieving a specific result",
        fields=["Task", "Action", "Goal"],
    ),
    FrameworkDefinition(
        id=FrameworkId.CREO,
        name="Creo [Context, Request, Explanation, Outcome] – Structured idea generation",
        description="CREO Framework [Context, Request, Explanation, Outcome] – Structured ideas, strategies, or problem-solving",
        fields=["Context", "Request", "Explanation", "Outcome"],
    ),
    FrameworkDefinition(
        id=FrameworkId.RISE,
        name="Rise [Role, Input, Steps, Execution] – Guided learning flows",
        description="RISE Framework [Role, Input, Steps, Execution] – Guided, step-by-step instructions or learning flows",
        fields=["Role", "Input", "Steps", "Execution"],
    ),
    FrameworkDefinition(
        id=FrameworkId.PAIN,
        name="Pain [Problem, Action, Information, Next Steps] – Action-oriented problem-solving",
        description="PAIN Framework [Problem, Action, Information, Next Steps] – Solving problems or getting action-oriented information",
        fields=["Problem", "Action", "Information", "Next Steps"],
    ),
    FrameworkDefinition(
        id=FrameworkId.COAST,
        name="Coast [Context, Objective, Actions, Scenario, Task] – Detailed workflow planning",
        description="COAST Framework [Context, Objective, Actions, Scenario, Task] – For detailed workflows or process planning",
        fields=["Context", "Objective", "Actions", "Scenario", "Task"],
    ),
    FrameworkDefinition(
        id=FrameworkId.ROSES,
        name="Roses [Role, Objective, Scenario, Expected Solution, Steps] – Analytical decision-making",
        description="ROSES Framework [Role, Objective, Scenario, Expected Solution, Steps] – Analytical or scenario-based decision-making",
        fields=["Role", "Objective", "Scenario", "Expected Solution", "Steps"],
    ),
]


class FrameworkRegistry:
    """Lookup over the framework catalog, keyed by id."""

    def __init__(self, catalog: Optional[List[FrameworkDefinition]] = None):
        self._frameworks: Dict[FrameworkId, FrameworkDefinition] = {}
        for framework in catalog if catalog is not None else FRAMEWORK_CATALOG:
            self.register(framework)

    def register(self, framework: FrameworkDefinition) -> None:
        if framework.id in self._frameworks:
            raise ValueError(f"Duplicate framework id: {framework.id.value}")
        self._frameworks[framework.id] = framework

    def get(self, framework_id) -> FrameworkDefinition:
        """
        Exact-match lookup. Accepts a FrameworkId or its string token.
        Unknown ids raise: the set is closed, so a miss is a caller bug.
        """
        return self._frameworks[FrameworkId(framework_id)]

    def list_all(self) -> List[FrameworkDefinition]:
        return list(self._frameworks.values())

    def __len__(self) -> int:
        return len(self._frameworks)


_global_registry: Optional[FrameworkRegistry] = None


def get_framework_registry() -> FrameworkRegistry:
    """Get or create the global framework registry"""
    global _global_registry
    if _global_registry is None:
        _global_registry = FrameworkRegistry()
    return _global_registry

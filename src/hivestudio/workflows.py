"""Fixed content of the bundled walkthroughs.

The runnable modules under :mod:`hivestudio.examples` print these; keeping the
definitions here lets the catalog list scenarios without importing the
runnable modules themselves.
"""

from __future__ import annotations

from .scenario import Scenario, Step

__all__ = ["ML_PIPELINE", "SIMPLE_API"]


ML_PIPELINE = Scenario(
    slug="ml-pipeline",
    title="ML pipeline",
    banner="🤖 Creating ML Pipeline with Specialized Team",
    steps=(
        Step(
            "Initialize ML team",
            './scripts/spawn-team.sh ml-team "Recommendation system"',
        ),
        Step(
            "Research and design",
            'npx claude-flow sparc run spec-pseudocode "User recommendation ML model"',
        ),
        Step(
            "Implementation",
            'npx claude-flow sparc run architect "ML pipeline architecture"',
        ),
        Step(
            "Training and evaluation",
            'npx claude-flow sparc tdd "Model training pipeline"',
        ),
    ),
    footer=("✅ ML Pipeline workflow defined",),
    tags=("ml", "team", "sparc"),
)

SIMPLE_API = Scenario(
    slug="simple-api",
    title="Simple API",
    banner="🚀 Creating Simple API with Agent Team",
    steps=(
        Step("Initialize team", './scripts/spawn-team.sh api-team "Simple REST API"'),
        Step("Use SPARC methodology", 'npx claude-flow sparc tdd "User authentication API"'),
        Step("Monitor progress", "npx claude-flow swarm status"),
    ),
    footer=(
        "✅ Example workflow defined",
        "Run the commands above to see the ecosystem in action!",
    ),
    tags=("api", "team", "sparc"),
)

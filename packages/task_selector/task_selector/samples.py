"""
Sample project used as the default workspace content.
"""

from typing import List

from .models import Constraints, Task


def _skills(D=0, FE=0, BE=0, DevOps=0, QA=0):
    return {"D": D, "FE": FE, "BE": BE, "DevOps": DevOps, "QA": QA}


def sample_tasks() -> List[Task]:
    return [
        Task(id="T1", name="UI Design", cost=3000, hours=6, value=8, categories=_skills(D=1)),
        Task(id="T2", name="Landing Page", cost=4000, hours=8, value=10, categories=_skills(FE=2)),
        Task(id="T3", name="Auth Backend", cost=5500, hours=10, value=14, categories=_skills(BE=2)),
        Task(id="T4", name="DB Schema", cost=4500, hours=7, value=11, categories=_skills(BE=1)),
        Task(id="T5", name="CI/CD Setup", cost=3500, hours=5, value=9, categories=_skills(DevOps=1)),
        Task(id="T6", name="Cloud Deploy", cost=6000, hours=9, value=12, categories=_skills(BE=1, DevOps=1)),
        Task(id="T7", name="Test Automation", cost=3000, hours=6, value=10, categories=_skills(QA=2)),
        Task(id="T8", name="Analytics & SEO", cost=2500, hours=4, value=6, categories=_skills(FE=1)),
    ]


def sample_constraints() -> Constraints:
    return Constraints(
        max_cost=19000,
        max_hours=40,
        min_category_totals=_skills(D=1, FE=2, BE=2, DevOps=1, QA=1),
    )

"""
Problem endpoints.
"""

from uuid import UUID

from fastapi import APIRouter, Depends, status
from sqlalchemy.orm import Session

from rest_api.services.domain import ProblemService
from shared.infrastructure.db import get_db
from shared.utils.schemas import ProblemCreate, ProblemOutput, ProblemUpdate


router = APIRouter(prefix="/problems", tags=["problems"])


@router.get("", response_model=list[ProblemOutput])
def list_problems(db: Session = Depends(get_db)) -> list[ProblemOutput]:
    return ProblemService(db).list_all()


@router.post("", response_model=ProblemOutput, status_code=status.HTTP_201_CREATED)
def create_problem(
    body: ProblemCreate,
    db: Session = Depends(get_db),
) -> ProblemOutput:
    """Record a problem. Status defaults to ``open`` and detection_timedate to now."""
    return ProblemService(db).create(body)


@router.get("/{problem_id}", response_model=ProblemOutput)
def get_problem(problem_id: UUID, db: Session = Depends(get_db)) -> ProblemOutput:
    return ProblemService(db).get_by_id(problem_id)


@router.api_route("/{problem_id}", methods=["PUT", "PATCH"], response_model=ProblemOutput)
def update_problem(
    problem_id: UUID,
    body: ProblemUpdate,
    db: Session = Depends(get_db),
) -> ProblemOutput:
    return ProblemService(db).update(problem_id, body)


@router.delete("/{problem_id}", status_code=status.HTTP_204_NO_CONTENT)
def delete_problem(problem_id: UUID, db: Session = Depends(get_db)) -> None:
    ProblemService(db).delete(problem_id)

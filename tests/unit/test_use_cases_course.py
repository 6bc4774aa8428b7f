"""
Unit tests for course use cases (create, update, delete, list owned, catalog).
"""
import asyncio
from unittest.mock import AsyncMock

import pytest

from coursehub.application.dto.course_dto import CourseCreateRequest, CourseDeleteRequest, CourseUpdateRequest
from coursehub.application.use_cases.course import (
    CreateCourseUseCase,
    DeleteCourseUseCase,
    ListCatalogUseCase,
    ListOwnedCoursesUseCase,
    UpdateCourseUseCase,
)
from coursehub.core.exceptions import Forbidden, ValidationError
from coursehub.domain.models import Course
from tests.fakes import InMemoryCourseRepository

ADMIN_A = "65f1c0ffee000000000000a1"
ADMIN_B = "65f1c0ffee000000000000b2"
COURSE_ID = "65f1c0ffee00000000000c01"


def _make_course(course_id: str = COURSE_ID, creator_id: str = ADMIN_A, title: str = "Intro to Python") -> Course:
    return Course(
        id=course_id,
        creator_id=creator_id,
        title=title,
        description="Basics",
        price=49.0,
        image_url="https://img/python.png",
    )


class TestCreateCourseUseCase:
    @pytest.mark.asyncio
    async def test_create_sets_creator(self):
        repo = AsyncMock()
        repo.create.return_value = _make_course()

        use_case = CreateCourseUseCase(repo)
        result = await use_case.execute(
            CourseCreateRequest(title="Intro to Python", description="Basics", price=49),
            creator_id=ADMIN_A,
        )

        assert result.course_id == COURSE_ID
        created = repo.create.call_args.args[0]
        assert created.creator_id == ADMIN_A
        assert created.id is None


class TestUpdateCourseUseCase:
    @pytest.mark.asyncio
    async def test_update_by_owner(self):
        repo = AsyncMock()
        repo.update_owned.return_value = _make_course(title="Advanced Python")

        use_case = UpdateCourseUseCase(repo)
        result = await use_case.execute(
            CourseUpdateRequest(course_id=COURSE_ID, title="Advanced Python"),
            creator_id=ADMIN_A,
        )

        assert result.course.title == "Advanced Python"
        repo.update_owned.assert_called_once_with(COURSE_ID, ADMIN_A, {"title": "Advanced Python"})

    @pytest.mark.asyncio
    async def test_update_not_owned_is_forbidden(self):
        repo = AsyncMock()
        repo.update_owned.return_value = None

        use_case = UpdateCourseUseCase(repo)
        with pytest.raises(Forbidden):
            await use_case.execute(CourseUpdateRequest(course_id=COURSE_ID, price=1), creator_id=ADMIN_B)

    @pytest.mark.asyncio
    async def test_update_without_fields_rejected(self):
        repo = AsyncMock()

        use_case = UpdateCourseUseCase(repo)
        with pytest.raises(ValidationError):
            await use_case.execute(CourseUpdateRequest(course_id=COURSE_ID), creator_id=ADMIN_A)
        repo.update_owned.assert_not_called()


class TestDeleteCourseUseCase:
    @pytest.mark.asyncio
    async def test_delete_by_owner(self):
        repo = AsyncMock()
        repo.delete_owned.return_value = True

        use_case = DeleteCourseUseCase(repo)
        result = await use_case.execute(CourseDeleteRequest(course_id=COURSE_ID), creator_id=ADMIN_A)

        assert result.course_id == COURSE_ID
        repo.delete_owned.assert_called_once_with(COURSE_ID, ADMIN_A)

    @pytest.mark.asyncio
    async def test_delete_not_owned_is_forbidden(self):
        repo = AsyncMock()
        repo.delete_owned.return_value = False

        use_case = DeleteCourseUseCase(repo)
        with pytest.raises(Forbidden):
            await use_case.execute(CourseDeleteRequest(course_id=COURSE_ID), creator_id=ADMIN_B)


class TestListCourses:
    @pytest.mark.asyncio
    async def test_list_owned_empty(self):
        repo = AsyncMock()
        repo.find_by_creator.return_value = []
        result = await ListOwnedCoursesUseCase(repo).execute(ADMIN_A)
        assert result.courses == []

    @pytest.mark.asyncio
    async def test_catalog_returns_all(self):
        repo = AsyncMock()
        repo.find_all.return_value = [
            _make_course("65f1c0ffee00000000000c01", ADMIN_A, "Course A"),
            _make_course("65f1c0ffee00000000000c02", ADMIN_B, "Course B"),
        ]
        result = await ListCatalogUseCase(repo).execute()
        assert [course.title for course in result.courses] == ["Course A", "Course B"]
        assert {course.creator_id for course in result.courses} == {ADMIN_A, ADMIN_B}


class TestOwnershipEnforcement:
    """Admin A's course can only be changed by admin A."""

    @pytest.mark.asyncio
    async def test_only_creator_may_update_or_delete(self):
        repo = InMemoryCourseRepository()
        created = await CreateCourseUseCase(repo).execute(
            CourseCreateRequest(title="Owned Course", price=10), creator_id=ADMIN_A
        )
        course_id = created.course_id

        with pytest.raises(Forbidden):
            await UpdateCourseUseCase(repo).execute(
                CourseUpdateRequest(course_id=course_id, title="Hijacked"), creator_id=ADMIN_B
            )
        with pytest.raises(Forbidden):
            await DeleteCourseUseCase(repo).execute(CourseDeleteRequest(course_id=course_id), creator_id=ADMIN_B)

        updated = await UpdateCourseUseCase(repo).execute(
            CourseUpdateRequest(course_id=course_id, title="Renamed"), creator_id=ADMIN_A
        )
        assert updated.course.title == "Renamed"
        assert updated.course.creator_id == ADMIN_A

        await DeleteCourseUseCase(repo).execute(CourseDeleteRequest(course_id=course_id), creator_id=ADMIN_A)
        assert await repo.find_all() == []

    @pytest.mark.asyncio
    async def test_concurrent_owner_updates_do_not_interleave(self):
        repo = InMemoryCourseRepository()
        created = await CreateCourseUseCase(repo).execute(
            CourseCreateRequest(title="Original", description="orig", price=1), creator_id=ADMIN_A
        )
        first = {"title": "First Title", "description": "first", "price": 10.0}
        second = {"title": "Second Title", "description": "second", "price": 20.0}
        use_case = UpdateCourseUseCase(repo)

        await asyncio.gather(
            use_case.execute(CourseUpdateRequest(course_id=created.course_id, **first), creator_id=ADMIN_A),
            use_case.execute(CourseUpdateRequest(course_id=created.course_id, **second), creator_id=ADMIN_A),
        )

        final = repo.courses[created.course_id]
        final_fields = {"title": final.title, "description": final.description, "price": final.price}
        assert final_fields in (first, second)
        assert final.creator_id == ADMIN_A

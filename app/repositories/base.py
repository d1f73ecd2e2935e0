"""기본 레포지토리 — 모든 레포지토리의 부모 클래스.

Base Repository — Parent class for all domain repositories.
Provides generic save/lookup operations and the fetch-with-count pagination
shared by the domain repositories.

Usage:
    class TeamRepository(BaseRepository[Team]):
        def __init__(self) -> None:
            super().__init__(Team)
"""

from typing import Any, Generic, Sequence, TypeVar

from sqlalchemy import Select, func, select
from sqlalchemy.ext.asyncio import AsyncSession

from app.database import Base
from app.utils.pagination import Page, PageRequest

# 제네릭 타입 변수 — SQLAlchemy 모델을 나타냄
# Generic type variable representing a SQLAlchemy model
ModelType = TypeVar("ModelType", bound=Base)


class BaseRepository(Generic[ModelType]):
    """제네릭 레포지토리.

    Generic repository providing common database operations.

    Attributes:
        model: SQLAlchemy 모델 클래스 (The SQLAlchemy model class)
    """

    def __init__(self, model: type[ModelType]) -> None:
        """레포지토리를 초기화합니다.

        Initialize the repository with a model class.

        Args:
            model: 이 레포지토리가 관리할 SQLAlchemy 모델 클래스
                   (SQLAlchemy model class this repository manages)
        """
        self.model: type[ModelType] = model

    async def get_by_id(self, db: AsyncSession, record_id: int) -> ModelType | None:
        """ID로 단일 레코드를 조회합니다.

        Retrieve a single record by its primary key.

        Args:
            db: 비동기 데이터베이스 세션 (Async database session)
            record_id: 조회할 레코드의 ID (Primary key of the record)

        Returns:
            ModelType | None: 조회된 레코드 또는 None (Found record or None)
        """
        result = await db.execute(select(self.model).where(self.model.id == record_id))
        return result.scalar_one_or_none()

    async def get_all(
        self,
        db: AsyncSession,
        filters: dict[str, Any] | None = None,
        order_by: Any | None = None,
    ) -> Sequence[ModelType]:
        """조건에 맞는 모든 레코드를 조회합니다.

        Retrieve all records matching the given equality filters.

        Args:
            db: 비동기 데이터베이스 세션 (Async database session)
            filters: 추가 필터 딕셔너리 {'컬럼명': 값}
                     (Additional filter dict {'column_name': value})
            order_by: 정렬 기준 컬럼, 기본은 id (Column to order by, defaults to id)

        Returns:
            Sequence[ModelType]: 조회된 레코드 목록 (List of matching records)
        """
        query: Select = select(self.model)

        # 동적 필터 적용 — Dynamic filter application
        if filters:
            for column_name, value in filters.items():
                if hasattr(self.model, column_name) and value is not None:
                    query = query.where(getattr(self.model, column_name) == value)

        query = query.order_by(order_by if order_by is not None else self.model.id)
        result = await db.execute(query)
        return result.scalars().all()

    async def get_paginated(
        self,
        db: AsyncSession,
        query: Select,
        page_request: PageRequest,
    ) -> Page:
        """페이지 항목과 전체 개수를 함께 조회합니다 (항상 COUNT 실행).

        Retrieve a page of rows together with the total count.
        Always runs two queries: the page itself with OFFSET/LIMIT and a COUNT
        over the same query wrapped as a subquery.

        Args:
            db: 비동기 데이터베이스 세션 (Async database session)
            query: 기본 SELECT 쿼리, 정렬 포함 (Base SELECT query including ordering)
            page_request: 페이지 요청 (Zero-based page request)

        Returns:
            Page: 행 목록과 전체 개수 (Rows and total count)
        """
        # 페이지 항목 조회 — Fetch page rows with offset/limit
        result = await db.execute(query.offset(page_request.offset).limit(page_request.size))
        rows: Sequence[Any] = result.all()

        # 전체 카운트 쿼리 — Total count query (ordering is irrelevant for COUNT)
        count_query: Select = select(func.count()).select_from(query.order_by(None).subquery())
        total: int = (await db.execute(count_query)).scalar() or 0

        return Page(
            content=list(rows),
            page=page_request.page,
            size=page_request.size,
            total_elements=total,
            sort=list(page_request.sort),
        )

    async def save(self, db: AsyncSession, obj: ModelType) -> ModelType:
        """레코드를 저장하고 생성된 ID를 채웁니다.

        Persist a new (or modified) record and flush to populate its primary key.

        Args:
            db: 비동기 데이터베이스 세션 (Async database session)
            obj: 저장할 ORM 객체 (ORM instance to persist)

        Returns:
            ModelType: 저장된 레코드 (The persisted record)
        """
        db.add(obj)
        await db.flush()
        await db.refresh(obj)
        return obj

"""SQLAlchemy implementation of Profile repository."""

from uuid import UUID

from sqlalchemy import func, select
from sqlalchemy.exc import IntegrityError
from sqlalchemy.ext.asyncio import AsyncSession

from core.exceptions import InvalidInputError, StorageConflictError
from domain.entities.profile import Profile
from domain.identifiers import validate_uuid
from domain.validation import sanitize_activation_token, sanitize_email, sanitize_username
from infrastructure.database.models import ProfileModel


class SQLAlchemyProfileRepository:
    """SQLAlchemy implementation of IProfileRepository."""

    def __init__(self, session: AsyncSession) -> None:
        self._session = session

    async def insert(self, profile: Profile) -> None:
        """Insert a new profile."""
        self._session.add(self._to_model(profile))
        try:
            await self._session.flush()
        except IntegrityError as exc:
            raise StorageConflictError(
                "Profile id, email or username is already taken"
            ) from exc

    async def update(self, profile: Profile) -> None:
        """Update an existing profile."""
        model = await self._get_model(profile.id)
        if not model:
            raise ValueError(f"Profile {profile.id} not found")

        model.activation_token = profile.activation_token
        model.email = profile.email
        model.password_hash = profile.password_hash
        model.username = profile.username

        try:
            await self._session.flush()
        except IntegrityError as exc:
            raise StorageConflictError("Profile email or username is already taken") from exc

    async def delete(self, profile: Profile) -> None:
        """Delete a profile."""
        model = await self._get_model(profile.id)
        if not model:
            return

        await self._session.delete(model)
        await self._session.flush()

    async def get_by_id(self, profile_id: UUID | str | bytes) -> Profile | None:
        """Get a profile by ID."""
        model = await self._get_model(validate_uuid(profile_id, "profile_id"))
        return self._to_entity(model) if model else None

    async def get_by_activation_token(self, activation_token: str) -> Profile | None:
        """Get the profile waiting on an activation token."""
        token = sanitize_activation_token(activation_token)
        if token is None:
            raise InvalidInputError(
                "Profile activation token is invalid or insecure.", "activation_token"
            )
        stmt = select(ProfileModel).where(ProfileModel.activation_token == token)
        result = await self._session.execute(stmt)
        model = result.scalar_one_or_none()
        return self._to_entity(model) if model else None

    async def get_by_email(self, email: str) -> Profile | None:
        """Get a profile by email."""
        stmt = select(ProfileModel).where(ProfileModel.email == sanitize_email(email))
        result = await self._session.execute(stmt)
        model = result.scalar_one_or_none()
        return self._to_entity(model) if model else None

    async def get_by_username(self, username: str) -> Profile | None:
        """Get a profile by username."""
        stmt = select(ProfileModel).where(ProfileModel.username == sanitize_username(username))
        result = await self._session.execute(stmt)
        model = result.scalar_one_or_none()
        return self._to_entity(model) if model else None

    async def get_all(self) -> list[Profile]:
        """Get every profile, ordered by username."""
        stmt = select(ProfileModel).order_by(ProfileModel.username)
        result = await self._session.execute(stmt)
        return [self._to_entity(model) for model in result.scalars()]

    async def count(self) -> int:
        """Count stored profiles."""
        stmt = select(func.count()).select_from(ProfileModel)
        result = await self._session.execute(stmt)
        return result.scalar() or 0

    async def _get_model(self, profile_id: UUID) -> ProfileModel | None:
        stmt = select(ProfileModel).where(ProfileModel.id == profile_id.bytes)
        result = await self._session.execute(stmt)
        return result.scalar_one_or_none()

    def _to_entity(self, model: ProfileModel) -> Profile:
        """Convert ORM model to domain entity."""
        return Profile(
            id=model.id,
            activation_token=model.activation_token,
            email=model.email,
            password_hash=model.password_hash,
            username=model.username,
        )

    def _to_model(self, entity: Profile) -> ProfileModel:
        """Convert domain entity to ORM model."""
        return ProfileModel(
            id=entity.id.bytes,
            activation_token=entity.activation_token,
            email=entity.email,
            password_hash=entity.password_hash,
            username=entity.username,
        )

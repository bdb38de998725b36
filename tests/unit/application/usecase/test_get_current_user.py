"""Unit tests for GetCurrentUserUseCase."""

import pytest

from mindful.application.usecase.auth import GetCurrentUserRequest, GetCurrentUserUseCase
from mindful.config import AuthSettings
from mindful.domain.error import UnauthenticatedError
from mindful.domain.repository import UnitOfWork, UserRepository
from mindful.domain.value import UserId
from mindful.util.jwt import create_token
from tests.harness import create_env_fixture

unit_env = create_env_fixture()


class TestGetCurrentUser:
    """Tests for GetCurrentUserUseCase."""

    @pytest.mark.asyncio
    async def test_valid_token_upserts_user_and_commits(self, unit_env):
        # Arrange
        use_case = await unit_env.get(GetCurrentUserUseCase)
        unit_of_work = await unit_env.get(UnitOfWork)
        user_repo = await unit_env.get(UserRepository)
        auth_settings = await unit_env.get(AuthSettings)
        token = create_token(
            "user-1", auth_settings, email="a@example.com", first_name="Ada"
        )

        # Act
        response = await use_case.execute(GetCurrentUserRequest(token=token))

        # Assert
        assert response.id == "user-1"
        assert response.first_name == "Ada"
        assert unit_of_work.commits == 1
        stored = await user_repo.find_by_id(UserId("user-1"))
        assert stored.email == "a@example.com"

    @pytest.mark.asyncio
    async def test_profile_refreshed_on_next_login(self, unit_env):
        use_case = await unit_env.get(GetCurrentUserUseCase)
        auth_settings = await unit_env.get(AuthSettings)

        first = await use_case.execute(
            GetCurrentUserRequest(
                token=create_token("user-1", auth_settings, first_name="Ada")
            )
        )
        second = await use_case.execute(
            GetCurrentUserRequest(
                token=create_token("user-1", auth_settings, first_name="Ada L.")
            )
        )

        assert second.first_name == "Ada L."
        assert second.created_at == first.created_at

    @pytest.mark.asyncio
    @pytest.mark.parametrize("token", [None, "", "not-a-jwt"])
    async def test_missing_or_invalid_token(self, unit_env, token):
        use_case = await unit_env.get(GetCurrentUserUseCase)

        with pytest.raises(UnauthenticatedError, match="Unauthorized"):
            await use_case.execute(GetCurrentUserRequest(token=token))

    @pytest.mark.asyncio
    async def test_token_signed_with_other_secret(self, unit_env):
        use_case = await unit_env.get(GetCurrentUserUseCase)
        forged = create_token("user-1", AuthSettings(jwt_secret="someone-elses-secret"))

        with pytest.raises(UnauthenticatedError):
            await use_case.execute(GetCurrentUserRequest(token=forged))

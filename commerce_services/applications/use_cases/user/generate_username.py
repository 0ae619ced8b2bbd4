from commerce_services.applications.interfaces.dtos.user import GeneratedUsername
from commerce_services.domain.exceptions import ValidationError
from commerce_services.domain.ports.repositories.user_repository import UserRepository


class GenerateUsernameUseCase:
    def __init__(self, user_repository: UserRepository):
        self.user_repository = user_repository

    async def execute(self, first_name: str, last_name: str) -> GeneratedUsername:
        """First initial plus last name, lower-cased, with 1, 2, ... appended until unused."""
        first_name, last_name = first_name.strip(), last_name.strip()
        errors = {}
        if not first_name:
            errors["firstName"] = "First name is required"
        if not last_name:
            errors["lastName"] = "Last name is required"
        if errors:
            raise ValidationError("Cannot generate a username", errors)

        base_username = (first_name[0] + last_name).lower()
        username = base_username
        counter = 1
        while await self.user_repository.get_by_username(username):
            username = f"{base_username}{counter}"
            counter += 1
        return GeneratedUsername(username=username)

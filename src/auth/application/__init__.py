from .use_cases import AuthUseCase

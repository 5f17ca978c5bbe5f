from .use_cases import GerbangUseCase

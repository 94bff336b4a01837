from study_assistant.bootstrap.components import Components


def get_components(env: str = "development") -> Components:
    return Components(env)

from typing import Optional


class UnsupportedTypeException(TypeError):
    def __init__(self, type_name: str, param: Optional[str] = None):
        self.type_name = type_name
        self.param = param
        super().__init__(f"unsupported type: {type_name}")

from dementia.models.base import MatrixModel


class LoginFlow(MatrixModel):
    type: str


class LoginFlowsResponse(MatrixModel):
    flows: list[LoginFlow] = []


class LoginResponse(MatrixModel):
    access_token: str
    user_id: str
    device_id: str | None = None
    home_server: str | None = None


class WhoAmIResponse(MatrixModel):
    user_id: str
    device_id: str | None = None
    is_guest: bool = False

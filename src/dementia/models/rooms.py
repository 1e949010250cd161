from dementia.models.base import MatrixModel


class JoinResponse(MatrixModel):
    room_id: str


class CreateRoomResponse(MatrixModel):
    room_id: str


class SendResponse(MatrixModel):
    event_id: str

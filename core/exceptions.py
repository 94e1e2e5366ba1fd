from fastapi import HTTPException, status


class SportsWeekException(HTTPException):
    def __init__(self, detail: str, status_code: int = status.HTTP_400_BAD_REQUEST):
        super().__init__(status_code=status_code, detail=detail)


class MatchNotFound(SportsWeekException):
    def __init__(self):
        super().__init__("Match not found", status.HTTP_404_NOT_FOUND)


class GameNotFound(SportsWeekException):
    def __init__(self):
        super().__init__("Game not found", status.HTTP_404_NOT_FOUND)


class FacultyNotFound(SportsWeekException):
    def __init__(self):
        super().__init__("Faculty not found", status.HTTP_404_NOT_FOUND)


class TeamNotFound(SportsWeekException):
    def __init__(self):
        super().__init__("Team not found", status.HTTP_404_NOT_FOUND)


class PlayerNotFound(SportsWeekException):
    def __init__(self):
        super().__init__("Player not found", status.HTTP_404_NOT_FOUND)


class ParticipantNotFound(SportsWeekException):
    def __init__(self):
        super().__init__("Match participant not found", status.HTTP_404_NOT_FOUND)


class UserNotFound(SportsWeekException):
    def __init__(self):
        super().__init__("User not found", status.HTTP_404_NOT_FOUND)


class DuplicateName(SportsWeekException):
    def __init__(self, entity: str, name: str):
        super().__init__(f"{entity} '{name}' already exists", status.HTTP_409_CONFLICT)


class UnauthorizedAction(SportsWeekException):
    def __init__(self, action: str = "perform this action"):
        super().__init__(f"Only the game manager or an admin can {action}", status.HTTP_403_FORBIDDEN)


# Помилки цілісності даних при нарахуванні балів: розрахунок повністю скасовується
class PointsIntegrityError(SportsWeekException):
    def __init__(self, detail: str):
        super().__init__(detail, status.HTTP_422_UNPROCESSABLE_ENTITY)


class MatchGameMissing(PointsIntegrityError):
    def __init__(self, game_id):
        super().__init__(f"Game not found: {game_id}")


class MatchHasNoParticipants(PointsIntegrityError):
    def __init__(self, match_id):
        super().__init__(f"No participants found for match: {match_id}")


class ParticipantFacultyUnresolved(PointsIntegrityError):
    def __init__(self, participant_id):
        super().__init__(f"Cannot determine faculty for participant: {participant_id}")


class WinnerNotAmongParticipants(PointsIntegrityError):
    def __init__(self, match_id):
        super().__init__(f"Winner not found in participants for match: {match_id}")


class WinnerFacultyMissing(PointsIntegrityError):
    def __init__(self, faculty_id):
        super().__init__(f"Winner faculty not found: {faculty_id}")


class PointsAlreadyApplied(SportsWeekException):
    def __init__(self, match_id):
        super().__init__(f"Points for match {match_id} have already been applied", status.HTTP_409_CONFLICT)


class PointsNotApplied(SportsWeekException):
    def __init__(self, match_id):
        super().__init__(f"Points for match {match_id} have not been applied", status.HTTP_409_CONFLICT)


class MatchLocked(SportsWeekException):
    def __init__(self, action: str = "change participant results"):
        super().__init__(f"Cannot {action}: points for this match are already applied", status.HTTP_409_CONFLICT)


class InvalidMatchTransition(SportsWeekException):
    def __init__(self, current: str, requested: str):
        super().__init__(f"Cannot change match status from {current} to {requested}")


class InvalidParticipant(SportsWeekException):
    def __init__(self, detail: str):
        super().__init__(detail)


class AppliedPointsExist(SportsWeekException):
    def __init__(self, entity: str):
        super().__init__(
            f"{entity} has matches with applied points; revoke them first",
            status.HTTP_409_CONFLICT
        )

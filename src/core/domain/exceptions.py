"""도메인 예외."""


class ExtractionError(Exception):
    """파일 단위 추출 실패.

    Attributes:
        file_name: 실패한 입력 파일명
        cause: 원인 예외
    """

    def __init__(self, file_name: str, cause: Exception):
        self.file_name = file_name
        self.cause = cause
        super().__init__(f"파일 파싱 실패: {file_name} - {cause}")

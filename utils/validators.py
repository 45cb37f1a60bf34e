"""
데이터 검증 로직

관리자 정원 설정 입력값 검증을 수행합니다.
"""


def validate_weekday(value):
    """
    요일 값 검증 (0=일요일 ~ 6=토요일)

    Args:
        value: 요청에서 받은 값 (int 또는 숫자 문자열)

    Returns:
        tuple: (weekday: int or None, error_message: str or None)

    Example:
        >>> validate_weekday(3)
        (3, None)

        >>> validate_weekday("7")
        (None, "Valid weekday (0-6) is required")
    """
    error = "Valid weekday (0-6) is required"

    if value is None or isinstance(value, bool):
        return (None, error)

    if isinstance(value, str):
        value = value.strip()
        try:
            value = int(value)
        except ValueError:
            return (None, error)

    if not isinstance(value, int) or not (0 <= value <= 6):
        return (None, error)

    return (value, None)


def validate_capacity_value(value, default):
    """
    성별 최대 인원 검증

    값이 없으면 기본값을 사용합니다.

    Args:
        value: 요청에서 받은 값 (None 허용)
        default (int): 기본 최대 인원

    Returns:
        tuple: (capacity: int or None, error_message: str or None)

    Example:
        >>> validate_capacity_value(None, 4)
        (4, None)

        >>> validate_capacity_value(-1, 4)
        (None, "최대 인원은 0 이상의 정수여야 합니다.")
    """
    if value is None:
        return (default, None)

    if isinstance(value, bool) or not isinstance(value, int) or value < 0:
        return (None, "최대 인원은 0 이상의 정수여야 합니다.")

    return (value, None)

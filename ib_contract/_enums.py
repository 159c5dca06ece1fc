from enum import IntEnum, StrEnum

class SecurityType(StrEnum):
    STOCK = 'STK'
    OPTION = 'OPT'
    FUTURE = 'FUT'
    INDEX = 'IND'
    FUTURES_OPTION = 'FOP'
    FOREX = 'CASH'
    BAG = 'BAG'

    @classmethod
    def from_str(cls, value: str) -> "SecurityType":
        """
        Converts a string to a SecurityType enum, trying the member name first and the wire code second
        so "FUTURE" -> FUTURE and "FUT" -> FUTURE

        Args:
            - value: str - The value to convert to a SecurityType enum

        Returns:
            - SecurityType: The SecurityType enum
        """
        try:
            return cls[value.upper()]
        except KeyError as exc:
            for member in cls:
                if member.value == value.upper():
                    return member

            raise KeyError(f"{value} is not a valid {cls.__name__}") from exc

    @classmethod
    def codes(cls) -> frozenset[str]:
        return frozenset(member.value for member in cls)

class Right(StrEnum):
    PUT = 'PUT'
    CALL = 'CALL'
    P = 'P'
    C = 'C'
    NONE = '0'

class OpenClose(IntEnum):
    SAME = 0 # Same as the parent security. The only option for retail customers.
    OPEN = 1 # Institutional customers only
    CLOSE = 2 # Institutional customers only
    UNKNOWN = 3

class LegAction(StrEnum):
    BUY = 'BUY'
    SELL = 'SELL'
    SSHORT = 'SSHORT'
    SSHORTX = 'SSHORTX'

class SerializeType(StrEnum):
    LONG = 'long'
    SHORT = 'short'

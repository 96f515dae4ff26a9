"""FIX wire message builders for tests."""

SOH = "\x01"


def fix_message(msg_type: str, delimiter: str = SOH) -> str:
    """Build a minimal FIX 4.2 wire message of the given MsgType."""
    fields = [
        "8=FIX.4.2",
        "9=65",
        f"35={msg_type}",
        "34=12",
        "49=BANK",
        "56=EXCH",
        "52=20160122-10:15:00.000",
        "10=123",
    ]
    return delimiter.join(fields) + delimiter


NEW_ORDER_SINGLE = fix_message("D")
EXECUTION_REPORT = fix_message("8")
MARKET_DATA_INCREMENTAL_REFRESH = fix_message("X")
QUOTE = fix_message("R")
QUOTE_REQUEST = fix_message("S")
HEARTBEAT = fix_message("0")

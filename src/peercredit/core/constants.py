"""Credit economy constants."""

MONTHLY_SEND_CAP = 100
CARRY_OVER_CAP = 50
VOUCHER_RATE = 5
DEFAULT_GIVABLE_BALANCE = 100

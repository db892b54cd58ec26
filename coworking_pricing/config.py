#!/usr/bin/env python3
# -*- coding: utf-8 -*-

"""
config.py

Configuration constants and defaults for the coworking pricing engine.

Key idea: the engine itself is pure
-----------------------------------
Every pricing function receives its rates through a RateCard value
(see pricing/rates.py). The constants below only seed the *default*
RateCard, so a process can:

- run with the built-in prices (hot desk 2.50/h, day pass 25.00 flat),
- override single prices through environment variables, or
- point COWORKING_RATE_CARD at a YAML/JSON rate card file.

Nothing here is mutated at runtime.
"""

import os  # Standard library: access environment variables (os.getenv).

# ---------------------------------------------------------------------
# Workspace prices
# ---------------------------------------------------------------------
# HOT_DESK_HOURLY_RATE:
# - Hourly price of a hot desk, before any NFT holder discount.
# - Meeting rooms do NOT use this; they carry their own hourly price
#   on the workspace record.
HOT_DESK_HOURLY_RATE = float(os.getenv("COWORKING_HOT_DESK_RATE", "2.50"))

# DAY_PASS_PRICE:
# - Flat price of a day pass (time-unlimited within the day).
DAY_PASS_PRICE = float(os.getenv("COWORKING_DAY_PASS_PRICE", "25.00"))

# PROCESSING_FEE:
# - Fixed surcharge added to card-paid transactions.
# - Waived when the booking is fully covered by membership or credits.
PROCESSING_FEE = float(os.getenv("COWORKING_PROCESSING_FEE", "2.00"))

# ---------------------------------------------------------------------
# NFT holder discounts
# ---------------------------------------------------------------------
# NFT_DISCOUNT_RATE:
# - Blanket discount on workspace charges for NFT holders (0.5 = 50%).
NFT_DISCOUNT_RATE = float(os.getenv("COWORKING_NFT_DISCOUNT_RATE", "0.5"))

# CAFE_DISCOUNT_RATE:
# - Discount on cafe orders for NFT holders (0.1 = 10%).
CAFE_DISCOUNT_RATE = float(os.getenv("COWORKING_CAFE_DISCOUNT_RATE", "0.1"))

# ---------------------------------------------------------------------
# Currency
# ---------------------------------------------------------------------
# DEFAULT_CURRENCY:
# - Informational; amounts are computed in major units (dollars).
# - Conversion to the gateway's minor units happens in payments.py.
DEFAULT_CURRENCY = os.getenv("COWORKING_CURRENCY", "USD")

# DISPLAY_SYMBOL:
# - Prefix used by reporting.format.format_price.
DISPLAY_SYMBOL = os.getenv("COWORKING_CURRENCY_SYMBOL", "$")

# ---------------------------------------------------------------------
# Rate card file (optional)
# ---------------------------------------------------------------------
# RATE_CARD_PATH:
# - If set, the CLI loads this YAML/JSON file and uses it instead of the
#   constants above. Empty string = use the constants.
RATE_CARD_PATH = os.getenv("COWORKING_RATE_CARD", "").strip()

# ---------------------------------------------------------------------
# Logging / audit
# ---------------------------------------------------------------------
# DEFAULT_LOG_LEVEL:
# - Level used by the CLI when --log-level is not given.
DEFAULT_LOG_LEVEL = os.getenv("COWORKING_LOG_LEVEL", "WARNING")

# AUDIT_LOG_PATH:
# - If set, the CLI appends one JSONL line per quote, rejection,
#   reconciliation and cost estimate here (utils/audit.py).
AUDIT_LOG_PATH = os.getenv("COWORKING_AUDIT_LOG", "").strip()

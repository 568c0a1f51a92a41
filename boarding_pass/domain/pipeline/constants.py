"""Domain pipeline constants: response keys, airline policy, date formats."""

# CandidateRecord field -> label phrases a model response may use for it.
# The parser matches longest phrase first, so overlapping phrases
# ("departure time" vs "departure date") never depend on table order.
FIELD_KEYS: dict[str, tuple[str, ...]] = {
    "flight_number": ("flight number", "flight no", "flight"),
    "airline": ("airline", "carrier"),
    "passenger_name": ("passenger name", "passenger", "name"),
    "departure_airport": ("departure airport", "origin airport"),
    "departure_city": ("departure city", "origin city"),
    "departure_code": ("departure code", "origin code"),
    "arrival_airport": ("arrival airport", "destination airport"),
    "arrival_city": ("arrival city", "destination city"),
    "arrival_code": ("arrival code", "destination code"),
    "departure_date": ("departure date", "flight date", "date"),
    "departure_time": ("departure time",),
    "arrival_time": ("arrival time",),
    "seat": ("seat number", "seat"),
    "gate": ("gate",),
    "terminal": ("terminal",),
    "confirmation_code": ("confirmation code", "confirmation", "booking reference", "pnr"),
    "boarding_time": ("boarding time",),
}

# Generic phrases match a whole label ("Date") only, never a substring ("Arrival Date")
EXACT_ONLY_PHRASES: frozenset[str] = frozenset({"flight", "name", "date"})

# (label, hint) pairs rendered into the extraction prompt, in output order
PROMPT_FIELDS: tuple[tuple[str, str], ...] = (
    ("Flight Number", "flight number like 6E6252, UA546, AI123"),
    ("Airline", "airline name like IndiGo, United Airlines, Air India"),
    ("Passenger Name", "full passenger name, often in format LASTNAME/FIRSTNAME"),
    ("Departure Airport", "departure airport name like Rajiv Gandhi International"),
    ("Departure City", "departure city name like Hyderabad, Delhi"),
    ("Departure Code", "3-letter IATA departure airport code like HYD, DEL"),
    ("Arrival Airport", "arrival airport name like Chandigarh International"),
    ("Arrival City", "arrival city name like Chandigarh, Mumbai"),
    ("Arrival Code", "3-letter IATA arrival airport code like IXC, BOM"),
    ("Departure Date", "departure date as DD Mon YYYY, YYYY-MM-DD or MM/DD/YYYY"),
    ("Departure Time", "departure time in any format found"),
    ("Arrival Time", "arrival time in any format found"),
    ("Seat", "seat number like 24D, 12A"),
    ("Gate", "gate number like 14, C109, B23"),
    ("Terminal", "terminal like 1, T2, North"),
    ("Confirmation Code", "PNR/confirmation code, usually 6 alphanumeric characters"),
    ("Boarding Time", "boarding time in any format found"),
)

# Formatting artifacts removed anywhere inside a value
MARKUP_TOKENS: tuple[str, ...] = ("*", "_", "`")
ABSENT_TOKEN = "null"

# Upper-cased substrings that make an extracted airline name untrustworthy.
# XSAT is a literal the on-device model emits in practice.
AIRLINE_DENYLIST: tuple[str, ...] = (
    "NULL",
    "NIL",
    "UNKNOWN",
    "N/A",
    "TBA",
    "AIRLINE",
    "FLIGHT",
    "CODE",
    "XSAT",
)
AIRLINE_MIN_LENGTH = 3

# "15 Jan 2025" is matched against MONTH_ABBREVIATIONS, then these numeric
# formats are tried in order: "2025-01-15", "01/15/2025"
NUMERIC_DATE_FORMATS: tuple[str, ...] = ("%Y-%m-%d", "%m/%d/%Y")

# English, independent of LC_TIME
MONTH_ABBREVIATIONS: tuple[str, ...] = (
    "jan", "feb", "mar", "apr", "may", "jun", "jul", "aug", "sep", "oct", "nov", "dec",
)

# IATA designator -> carrier name, used when the reference API is not configured
FALLBACK_AIRLINES: dict[str, str] = {
    "6E": "IndiGo",
    "AI": "Air India",
    "UA": "United Airlines",
    "AA": "American Airlines",
    "DL": "Delta Air Lines",
    "SG": "SpiceJet",
    "UK": "Vistara",
    "EK": "Emirates",
    "QR": "Qatar Airways",
    "WY": "Oman Air",
    "SQ": "Singapore Airlines",
    "LH": "Lufthansa",
    "BA": "British Airways",
    "AF": "Air France",
    "KL": "KLM",
    "TK": "Turkish Airlines",
    "CX": "Cathay Pacific",
    "JL": "Japan Airlines",
    "NH": "ANA",
    "AC": "Air Canada",
    "QF": "Qantas",
}

"""Configuration constants for the OSCE Examiner Feedback Dashboard."""

import os

# Feedback source (Google Apps Script web app returning the sheet as JSON)
FEEDBACK_SOURCE_URL = os.getenv(
    "FEEDBACK_SOURCE_URL",
    "https://script.google.com/macros/s/"
    "AKfycbzZusUTAQU3Xq5056fPrc-Ye-6sfN8Ok-vNhKyds2Wo3Eev_rOEGJQ0VTtfCkYZioE/exec",
).strip()

# HTTP configuration
DEFAULT_TIMEOUT = 30  # seconds
MAX_RETRIES = 0  # single attempt; callers may opt in to retries
RETRY_BACKOFF_FACTOR = 2  # exponential backoff multiplier
DEFAULT_RETRY_AFTER = 60  # seconds, when a 429 carries no usable Retry-After

# Logging
LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO").strip().upper()

# Match-all sentinel for the date and station selectors
ALL = "All"

# Likert-scale questions (numeric) and open-ended questions (free text)
SCORE_FIELDS: tuple[str, ...] = ("q1", "q2", "q3", "q4", "q5", "q6", "q7", "q8")
TEXT_FIELDS: tuple[str, ...] = ("q9", "q10")

QUESTION_LABELS: dict[str, str] = {
    "Q1": "1. 測驗內容及其難度合宜",
    "Q2": "2. 評核表評分項目合宜",
    "Q3": "3. 評分說明內容清楚、合宜",
    "Q4": "4. 試題指引內容足夠",
    "Q5": "5. 測驗時間(8 mins)長短合宜",
    "Q6": "6. 試場各項標示、移動路線規劃清楚、合宜",
    "Q7": "7. 試場各項鈴聲、廣播清楚、合宜",
    "Q8": "8. 試務運作流程順暢、試務人員紀律良好",
}

FEEDBACK_CHANNEL_TITLES: dict[str, str] = {
    "q9": "Q9. 考題建議",
    "q10": "Q10. 整體建議",
}

# Score scale
SCORE_RANGE: tuple[int, int] = (1, 5)
SCORE_LEGEND: dict[int, str] = {
    5: "非常同意",
    4: "同意",
    3: "無意見",
    2: "不同意",
    1: "非常不同意",
}
SCORE_COLORS: dict[int, str] = {
    5: "#3b82f6",
    4: "#93c5fd",
    3: "#9ca3af",
    2: "#fdba74",
    1: "#ef4444",
}

# A question whose mean score falls below this needs improvement
IMPROVEMENT_THRESHOLD = 3.5

# Radial axis upper bound of the profile (radar) chart
PROFILE_DOMAIN_MAX = 5

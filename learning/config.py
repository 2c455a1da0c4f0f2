DEFAULT_EASE_FACTOR = 2.5
MIN_EASE_FACTOR = 1.3

MIN_QUALITY = 1
MAX_QUALITY = 5
PASSING_QUALITY = 3    # below this a review counts as failed

FAILED_INTERVAL_DAYS = 1
FIRST_INTERVAL_DAYS = 1
SECOND_INTERVAL_DAYS = 6

QUIZ_CORRECT_QUALITY = 5
QUIZ_INCORRECT_QUALITY = 2

MINIMUM_DAILY_QUESTIONS = 5
XP_PER_REVIEW = 10
# Study screens used 3, the dashboard used 5; one value for both.
MASTERY_THRESHOLD = 3

MODE_WEIGHT_FACTORS = {
    "learn": 3,      # lessons + quizzes
    "lessons": 2,
    "quiz": 5,
}

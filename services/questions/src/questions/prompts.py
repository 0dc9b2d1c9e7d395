"""Fixed strings sent to the question-generation endpoint."""

STUDY_QUESTIONS_PROMPT = (
    "Generate study questions based on this content. "
    "Make them thought-provoking and focused on understanding key concepts."
)

# The endpoint requires a filename; the content is a batch so no real name applies.
PLACEHOLDER_FILENAME = "something.txt"

"""The Fitzpatrick questionnaire — six questions scored 0 to 4."""

from skin_assessment.quiz.domain.question import Option, Question


def _options(*labels: str) -> tuple[Option, ...]:
    return tuple(Option(label=label, score=score) for score, label in enumerate(labels))


QUESTIONS: tuple[Question, ...] = (
    Question(
        id="eye_color",
        prompt="What is your natural eye colour?",
        options=_options(
            "Light blue, light grey, or light green",
            "Blue, grey, or green",
            "Hazel or light brown",
            "Dark brown",
            "Brownish black",
        ),
    ),
    Question(
        id="hair_color",
        prompt="What is your natural hair colour?",
        options=_options(
            "Red or light blonde",
            "Blonde",
            "Dark blonde or light brown",
            "Dark brown",
            "Black",
        ),
    ),
    Question(
        id="skin_color",
        prompt="What is your natural skin colour (unexposed areas)?",
        options=_options(
            "Ivory white",
            "Fair or pale",
            "Fair to beige with golden undertone",
            "Olive or light brown",
            "Dark brown or black",
        ),
    ),
    Question(
        id="freckles",
        prompt="How many freckles do you have on unexposed areas?",
        options=_options("Many", "Several", "A few", "Very few", "None"),
    ),
    Question(
        id="sun_reaction",
        prompt="How does your skin react to sun exposure?",
        options=_options(
            "Always burns, blisters, and peels",
            "Often burns, blisters, and peels",
            "Burns moderately",
            "Burns rarely",
            "Rarely or never burns",
        ),
    ),
    Question(
        id="tanning",
        prompt="Does your skin tan?",
        options=_options(
            "Never — I just burn and peel",
            "Seldom",
            "Sometimes",
            "Often",
            "Always — I never burn",
        ),
    ),
)

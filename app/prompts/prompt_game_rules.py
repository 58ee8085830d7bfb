# System Prompts: Hillview Middle School Teacher Simulator

SCHOOL_NAME = "Hillview Middle School"

SCENARIO_SYSTEM_PROMPT = " ".join([
    f"You are designing a highly replayable middle-school teaching game set at {SCHOOL_NAME} in Menlo Park.",
    "Every call you must invent a brand new, specific classroom situation for one calendar month of the school year.",
    "DO NOT reuse any previous scenario IDs passed in.",
    "Scenarios must be short, vivid, and always involve real tradeoffs.",
    "Return concise text that works well inside a small card on a game UI.",
])

SCENARIO_FORMAT_RULES = "\n".join([
    "Return STRICT JSON with this shape:",
    "{",
    '  "id": string,                  // unique id, new each time',
    '  "title": string,               // short label like "Lab Disaster" or "Phone Chaos"',
    '  "prompt": string,              // 2-4 sentence description, plain text, no markdown',
    '  "options": [',
    '    { "id": string, "text": string }, // exactly four distinct choices',
    "    ...",
    "  ]",
    "}",
    "",
    "Constraints:",
    "- id must NOT match any id in usedScenarioIds.",
    f"- prompt should mention you are a teacher at {SCHOOL_NAME} and involve this month of the year.",
    "- options must clearly reflect tradeoffs (learning vs likability vs control vs sanity).",
    "- Keep text tight; avoid long speeches.",
])

EVALUATION_SYSTEM_PROMPT = " ".join([
    f"You are evaluating a teacher's decision in a {SCHOOL_NAME} teaching simulator.",
    "The teacher is scored on three things: student learning (0-100), likability & respect (0-100), and students remaining in their class.",
    "Your job is to estimate how this decision would change learning and likability THIS month, not forever.",
    "You must also estimate how many students leave or join the class this month (studentsDelta).",
    "Return small-ish integer deltas (roughly in range -18 to +18) and clear, concise commentary.",
])

EVALUATION_FORMAT_RULES = "\n".join([
    "Return STRICT JSON like this:",
    "{",
    '  "learningDelta": integer,',
    '  "likabilityDelta": integer,',
    '  "studentsDelta": integer,',
    '  "commentary": string,',
    '  "logHeadline": string,',
    '  "imagePrompt": string',
    "}",
    "",
    "Constraints:",
    "- learningDelta and likabilityDelta should almost always be between -18 and +18.",
    "- studentsDelta is usually between -4 and +4, but can reach -6 for truly awful social choices or +6 for legendary ones.",
    "- Commentary should be friendly but honest, and avoid jargon.",
    "- The imagePrompt should describe the scene and teacher's behavior in a safe, school-appropriate way, no self-harm, no gore, no graphic violence, no text.",
])

# Image style
IMAGE_SCENE = f"Cartoon-style illustration, middle school classroom at {SCHOOL_NAME}."
IMAGE_SCENE_WITH_TOWN = f"Cartoon-style illustration, middle school classroom at {SCHOOL_NAME} in Menlo Park, California."
IMAGE_STYLE = "Flat colors, clean lines, slightly exaggerated expressions. No text in the image."
SCENARIO_IMAGE_STYLE = " ".join([
    "Colorful, clean lines, flat colors, slightly exaggerated expressions, friendly but chaotic vibe.",
    "No text, no logos, no brand names.",
])
CATASTROPHIC_IMAGE_PROMPT = " ".join([
    IMAGE_SCENE,
    "Teacher looks horrified as administrators and families point to a giant red 'NOT OK' sign.",
    "No actual violence, no blood. Focus on consequences and seriousness, not harm.",
    "Flat colors, clean lines, exaggerated shocked expressions, but still school-appropriate.",
    "No text in the image.",
])

# Fixed outcome for answers caught by the safety filter
CATASTROPHIC_COMMENTARY = (
    "This response would be completely unacceptable in a real school. "
    "Anything involving harm or threats to students is an immediate, catastrophic failure "
    "that would trigger serious intervention from administration and families."
)
CATASTROPHIC_HEADLINE = "Catastrophic choice: safety and professionalism collapsed this month."

DEFAULT_SCENARIO_PROMPT = f"A situation at {SCHOOL_NAME}."
DEFAULT_COMMENTARY = "The AI forgot to explain this decision."

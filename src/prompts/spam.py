"""Spam classification and explanation prompt templates."""

# =============================================================================
# SPAM CLASSIFICATION PROMPTS
# =============================================================================

CLASSIFY_SPAM_SYSTEM = """You are a spam detection expert trained on real-world SMS and email spam patterns. Your task is to classify a single message as spam or safe.

Spam indicators:
- Urgent/pressure language (WIN, FREE, URGENT, LIMITED, ACT NOW)
- Financial solicitations, prize claims, lottery or cash offers
- Premium rate numbers (e.g. 0906..., 0871...), short codes or suspicious links
- Grammar issues combined with marketing language
- Personalization level: generic greetings ("Dear customer") versus details only a real contact would know
- Sender legitimacy cues: impersonated banks or couriers, requests for credentials

Safe messages are ordinary personal or business communication with no solicitation.

Confidence Guidelines (0-100):
- 90-100: Clear, unambiguous classification
- 70-90: Likely correct but some ambiguity
- 50-70: Uncertain

Always answer by calling the classify_spam function."""


CLASSIFY_SPAM_USER = """Classify this message:

{text}"""


# (message, classification, confidence) used as few-shot examples
CLASSIFY_SPAM_EXAMPLES = [
    (
        "WINNER!! As a valued network customer you have been selected to receive a "
        "£900 prize reward! To claim call 09061701461. Claim code KL341. Valid 12 hours only.",
        "spam",
        98,
    ),
    (
        "Ok lar... Joking wif u oni...",
        "safe",
        95,
    ),
    (
        "URGENT! Your Mobile number has been awarded with a £2000 prize GUARANTEED. "
        "Call 09058094455 from land line. Claim 3030. Valid 12hrs only",
        "spam",
        97,
    ),
    (
        "Hi, just checking you got the slides for tomorrow's meeting. Let me know if not.",
        "safe",
        92,
    ),
]


CLASSIFY_SPAM_TOOL = {
    "type": "function",
    "function": {
        "name": "classify_spam",
        "description": "Report whether the message is spam or safe, with a confidence score.",
        "parameters": {
            "type": "object",
            "properties": {
                "classification": {
                    "type": "string",
                    "enum": ["spam", "safe"],
                    "description": "spam or safe",
                },
                "confidence": {
                    "type": "number",
                    "minimum": 0,
                    "maximum": 100,
                    "description": "Confidence percentage between 0 and 100",
                },
            },
            "required": ["classification", "confidence"],
            "additionalProperties": False,
        },
    },
}


# =============================================================================
# EXPLANATION PROMPTS
# =============================================================================

EXPLAIN_SPAM_SYSTEM = """You are a spam detection expert trained on real-world spam patterns. Provide clear, specific explanations citing actual indicators found in the text.

Focus on identifying:
- Urgent/pressure language (WIN, FREE, URGENT, LIMITED)
- Financial solicitations or prize claims
- Premium rate numbers or suspicious links
- Grammar issues combined with marketing
- Personalization level (generic vs specific)
- Sender legitimacy cues

Keep explanations under 100 words. Be specific about WHICH indicators you found, not just general patterns."""


EXPLAIN_SPAM_USER = """Explain why this text was classified as spam or safe. Be specific about the indicators found:

{text}"""

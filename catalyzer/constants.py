"""All magic values live here — no inline literals anywhere else."""

# Server defaults
DEFAULT_PORT = 3000
DEFAULT_HOST = "0.0.0.0"
DEFAULT_STATIC_DIR = "public"
DEFAULT_MAX_UPLOAD_MB = 20
BYTES_PER_MB = 1024 * 1024
APP_TITLE = "The Catalyzer"
APP_VERSION = "1.0.0"

# Upload field
UPLOAD_FIELD = "image"
UPLOAD_DEFAULT_FILENAME = "upload"
# Room for multipart boundaries and part headers around the file itself
UPLOAD_FORM_OVERHEAD = 64 * 1024

# Image normalization
MAX_IMAGE_DIMENSION = 1024
JPEG_QUALITY = 85
IMAGE_FORMAT = "JPEG"
IMAGE_MEDIA_TYPE = "image/jpeg"

# Vision backends
PROVIDER_GEMINI = "gemini"
PROVIDER_CLAUDE = "claude"
PROVIDER_OPENAI = "openai"
DEFAULT_VISION_PROVIDER = PROVIDER_GEMINI
GEMINI_VISION_MODEL = "gemini-2.0-flash"
CLAUDE_VISION_MODEL = "claude-opus-4-6"
OPENAI_VISION_MODEL = "gpt-4o"
VISION_MAX_TOKENS = 1024

# Observations are reported in this order
OBSERVATION_COUNT = 4
CONFIDENCE_MIN = 0
CONFIDENCE_MAX = 100

# Log / user-facing messages
MSG_HEALTH = "The Catalyzer is ready to detect Pazuzu! 🐱"
MSG_NO_IMAGE = "No image provided"
MSG_IMAGE_TOO_LARGE = "Image exceeds the %d MB upload limit"
MSG_ANALYSIS_FAILED = "Analysis failed"
MSG_PARSE_FAILED = "Failed to parse analysis"
MSG_RECEIVED_IMAGE = "📸 Received image: %s (%.1fKB)"
MSG_RESIZED_IMAGE = "🔧 Resized to %.1fKB (%dx%d)"
MSG_MODEL_REPLY = "🤖 %s response: %s"
MSG_VERDICT = "✅ Analysis complete: %s"
MSG_VERDICT_PAZUZU = "PAZUZU!"
MSG_VERDICT_CALM = "Calm"
MSG_VERDICT_NOT_CAT = "Not a cat"
MSG_PARSE_ERROR_LOG = "Failed to parse %s response: %s"
MSG_ANALYSIS_ERROR_LOG = "Analysis error"
MSG_UPLOAD_REJECTED = "Rejected upload %s: larger than %d bytes"
MSG_NO_STATIC_DIR = "Static directory %s not found — front-end disabled"
MSG_STARTUP_FAILED = "❌ %s"
MSG_BANNER = (
    "\n🐱 ═══════════════════════════════════════════════════════ 🐱\n"
    "   THE CATALYZER - Pazuzu Detection System v%s\n"
    "   Server running on http://localhost:%d (vision: %s)\n"
    "   Ready to analyze cats for chaotic energy! 😈\n"
    "🐱 ═══════════════════════════════════════════════════════ 🐱"
)

PAZUZU_PROMPT = """You are an expert cat behavior analyst specializing in detecting "Pazuzu mode" - the state when a cat is in attack/chaos/crazy mode, ready to pounce or cause mischief.

Analyze this cat photo and determine if the cat is in PAZUZU MODE (chaotic/attack ready) or CALM MODE (relaxed/peaceful).

Look for these PAZUZU indicators:
- Direct, intense "lock-on" stare (targeting, not just looking)
- Dilated pupils (especially in normal lighting)
- Forward-focused, tense ears ("alert triangle" position)
- Body weight shifted forward, coiled posture
- Paws positioned together, ready to launch
- Tense brow/forehead (micro-furrowing above eyes)
- Tail up and alert, possibly twitching
- Overall stillness that feels like "predator patience"
- The unmistakable "I'm about to cause chaos" energy

Look for these CALM indicators:
- Soft, relaxed eyes (possibly slow-blink ready)
- Normal pupils for the lighting
- Ears relaxed, possibly slightly outward
- Body melted/draped, loose posture
- Paws casually placed, not positioned
- Smooth, relaxed brow
- Tail down or loosely curled
- Overall "observing" rather than "hunting" vibe

IMPORTANT: If this image does not contain a cat, respond with exactly:
{"is_cat": false}

If this IS a cat, respond with this exact JSON format:
{
    "is_cat": true,
    "is_pazuzu": true/false,
    "confidence": 0-100,
    "threat_level": "MINIMAL" | "LOW" | "MODERATE" | "HIGH" | "MAXIMUM" | "RUN",
    "observations": [
        "observation about eyes",
        "observation about ears",
        "observation about body posture",
        "observation about overall vibe"
    ],
    "summary": "A brief, fun one-liner about the cat's current state"
}

Be playful and fun with your observations! This is for entertainment.
Respond ONLY with the JSON, no other text."""

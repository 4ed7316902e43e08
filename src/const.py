"""Constants for the MLX vs Ollama benchmark harness."""

# Default backend endpoints
DEFAULT_LMSTUDIO_HOST = "http://localhost"
DEFAULT_LMSTUDIO_PORT = 1234
DEFAULT_OLLAMA_HOST = "http://localhost"
DEFAULT_OLLAMA_PORT = 11434
LMSTUDIO_CHAT_PATH = "/v1/chat/completions"
REQUEST_TIMEOUT = 300  # seconds, generous for long local generations

# Default models
DEFAULT_MLX_MODEL = "qwen3-4b-instruct-2507-mlx"
DEFAULT_OLLAMA_MODEL = "hopephoto/Qwen3-4B-Instruct-2507_q8:latest"
DEFAULT_JUDGE_MODEL = "openai/gpt-oss-20b"
DEFAULT_ITERATIONS = 100

# Backend names
BACKEND_LMSTUDIO = "lmstudio"
BACKEND_OLLAMA = "ollama"

# Logging configuration
DEFAULT_LOG_LEVEL = "INFO"
LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"
LOG_DATE_FORMAT = "%Y-%m-%d %H:%M:%S"

# Library log levels
LIBRARY_LOG_LEVELS = {
    "httpx": "WARNING",
    "httpcore": "WARNING",
}

# Request/Response field names
MODEL_FIELD = "model"
MESSAGES_FIELD = "messages"
STREAM_FIELD = "stream"
TEMPERATURE_FIELD = "temperature"
RESPONSE_FIELD = "response"
CHOICES_FIELD = "choices"
MESSAGE_FIELD = "message"
CONTENT_FIELD = "content"
ROLE_FIELD = "role"
USER_ROLE = "user"

# File names
CONFIG_FILE_NAME = "config.json"

# Default benchmark prompt: a document followed by questions that need arithmetic,
# cross-referencing and a constrained summary.
DEFAULT_PROMPT = """Document:
Title: Feasibility Assessment of the Northbridge Autonomous Delivery Network (NADN)
Author: Department of Urban Mobility Systems
Date: March 2024
1. Overview
The NADN program proposes deploying 1,250 autonomous delivery drones across the city of Northbridge by 2030. The expected operational window is 6,000 hours per year per drone, with an estimated payload capacity of 3.2 kg, though a competing vendor claims they can increase payload by 18% without increasing energy consumption.
2. Energy Consumption Data
Field tests in 2023 showed average power use of 410 Wh per flight-hour under nominal weather conditions. However, during winter trials, energy use increased by 22-27%, with an average of 513 Wh per flight-hour when winds exceeded 18 km/h.
A proposed "adaptive rotor system" (ARS) is predicted to reduce winter energy overhead by 10% of the excess above nominal, though critics argue the ARS tests used artificially favorable wind tunnel conditions.
3. Economic Projection
The city estimates the NADN will reduce last-mile delivery emissions by 11,800 metric tons CO2 annually and save local businesses $47.3 million per year.
However, an independent audit uncovered a contradictory figure: the emissions reduction was computed assuming full adoption rates of 95%, although historical adoption rates for similar tech have averaged 62-74%.
Maintenance per drone is projected at $1,480 annually, but the audit found that this number excluded the ARS maintenance overhead, which adds an additional $190 +/- $40 per drone.
4. Safety + Incident Log (Excerpt)
Between 2022 and 2023, there were 17 critical incidents, of which:
6 were due to software navigation errors
8 due to battery degradation issues
3 due to unexpected bird interference
Of note: Incident #14 included conflicting telemetry logs: GPS data recorded a stable hover while IMU data registered a 4.3 m/s lateral drift.
5. Policy Considerations
A draft ordinance requires that all NADN drones maintain a minimum 45 m standoff distance from residential buildings except during emergency relief operations. Emergency exemptions last a maximum of 72 hours, although a 2021 court ruling suggests that temporary exemptions can be extended if "critical logistics continuity is at risk."
Stakeholder feedback shows 38% public approval, 41% neutral, and 21% opposed, though opposition jumps to 44% in districts with above-average noise complaints.

Based on the document above, answer the following questions:
Q1: If the adaptive rotor system works as predicted, what would the new average winter energy consumption per flight-hour be, assuming winter overhead remains 27% above nominal conditions?
Q2: Using the corrected maintenance numbers (including ARS overhead), what is the total annual maintenance cost for the full fleet of 1,250 drones?
Q3: Identify two contradictions in the economic or environmental projections and explain why they matter for policy decisions.
Q4: Given the incident log, which subsystem most likely needs priority redesign, and why? Include reasoning that uses the severity and nature of the failures.
Q5: A severe snowstorm triggers emergency relief operations lasting 68 hours. According to the policy text and court ruling, can the city legally extend exemptions beyond 72 hours in this situation?
Q6: How would a 30% decline in public approval in high-noise districts impact the probability of ordinance passage, considering the economic benefits and safety record?
Q7: Does the vendor's 18% payload increase claim seem credible or risky in context of the given energy consumption data and winter overhead effects?
Q8: Summarize the feasibility of NADN in exactly three sentences, each addressing: technical viability, economic justification, policy/safety concerns. (Be strict: no more than three sentences.)"""

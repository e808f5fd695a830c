"""
Langchain Prompt Templates
Defines prompts for the generated flight actions
"""

from langchain_core.prompts import PromptTemplate

# ============================================
# System Prompt (structured output)
# ============================================

STRUCTURED_SYSTEM_PROMPT = PromptTemplate(
    input_variables=["json_schema"],
    template="""You generate realistic sample data for a flight booking application.

Return ONLY a valid JSON object that conforms to this JSON schema. Do not include any explanation or markdown formatting.

JSON Schema:
{json_schema}"""
)

# ============================================
# Flight Status Prompt
# ============================================

FLIGHT_STATUS_PROMPT = PromptTemplate(
    input_variables=["flight_number", "date"],
    template="Flight status for flight number {flight_number} on {date}"
)

# ============================================
# Seat Map Prompt
# ============================================

SEAT_MAP_PROMPT = PromptTemplate(
    input_variables=["flight_number"],
    template=(
        "Simulate available seats for flight number {flight_number}, "
        "6 seats on each row and 5 rows in total, "
        "adjust pricing based on location of seat"
    )
)

# ============================================
# Reservation Price Prompt
# ============================================

RESERVATION_PRICE_PROMPT = PromptTemplate(
    input_variables=["reservation"],
    template="Generate price for the following reservation \n\n {reservation}"
)

"""Plant diagnosis prompt.

The bold headers requested here are the tokens the report classifier looks
for (``IDENTIFICATION``, ``DISEASE``/``ISSUE``, ``SYMPTOMS``, ...). Changing
a header means updating ``kisan_ai.domains.plant.categories`` too.
"""

from __future__ import annotations

SECTION_HEADERS: tuple[str, ...] = (
    "PLANT IDENTIFICATION",
    "DISEASE/ISSUE DETECTED",
    "SYMPTOMS OBSERVED",
    "POSSIBLE CAUSES",
    "TREATMENT RECOMMENDATIONS",
    "PREVENTION TIPS",
    "PROGNOSIS",
)

DIAGNOSIS_PROMPT = """You are an expert plant pathologist and agricultural specialist. \
Analyze this plant image for diseases, pests, or health issues. Please provide a detailed \
analysis in the following format:

**PLANT IDENTIFICATION:**
- Plant type/species
- Growth stage

**DISEASE/ISSUE DETECTED:**
- Disease name (if any)
- Severity level (Mild/Moderate/Severe)
- Confidence level in diagnosis

**SYMPTOMS OBSERVED:**
- Visible symptoms on leaves, stems, fruits
- Color changes, spots, wilting, etc.

**POSSIBLE CAUSES:**
- Pathogen type (fungal, bacterial, viral, pest)
- Environmental factors

**TREATMENT RECOMMENDATIONS:**
- Immediate actions needed
- Organic treatment options
- Chemical treatment options (if necessary)
- Application methods and timing

**PREVENTION TIPS:**
- Cultural practices
- Crop rotation suggestions
- Monitoring recommendations

**PROGNOSIS:**
- Expected recovery time
- Potential yield impact
- Spread risk to other plants

If the image doesn't show a plant or shows a healthy plant, please indicate that clearly."""

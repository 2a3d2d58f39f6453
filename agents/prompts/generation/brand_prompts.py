"""
Brand Guidelines Generation Prompts

Prompts used to turn a website AnalysisResult into brand guidelines. Every
user prompt asks for a single JSON object; the shape of that object is what
models/brand.py validates.
"""

import json

from agents.domain.models import AnalysisResult, ColorUsage
from agents.tools.brand.content_extractor import generate_content_summary


def _or(value, fallback: str) -> str:
    return value if value else fallback


def get_brand_strategy_system_prompt() -> str:
    """System prompt shared by every generation step."""
    return """You are an expert brand strategist and copywriter with 20+ years of experience creating comprehensive brand guidelines for Fortune 500 companies and innovative startups. Your expertise spans brand positioning, messaging frameworks, verbal identity, and creative direction.

Your task is to generate professional brand strategy content based on website analysis data. The output should be sophisticated, actionable, and reflect deep brand thinking.

Guidelines for your responses:
- Write in a confident, professional tone
- Be specific and avoid generic statements
- Create content that feels authentic to the brand being analyzed
- Use industry-appropriate language and terminology
- Ensure all content is unique and tailored to the specific brand

CRITICAL: You MUST respond with ONLY valid JSON. Do not include any text before or after the JSON. Do not include markdown code fences. Do not include explanations. Your entire response must be a single valid JSON object that can be parsed directly."""


def get_brand_positioning_prompt(analysis: AnalysisResult) -> str:
    content_summary = generate_content_summary(analysis.content)
    name = analysis.brand_name

    return f"""Based on the following website analysis for "{name}", generate comprehensive brand positioning content.

WEBSITE ANALYSIS:
URL: {analysis.url}
Industry: {_or(analysis.industry, 'Not determined')}
Tagline: {_or(analysis.tagline, 'None found')}

EXTRACTED CONTENT:
{content_summary}

Generate the following brand positioning elements as JSON:

{{
  "positioning": {{
    "statement": "A 2-3 sentence brand positioning statement that defines the brand's unique place in the market",
    "targetAudience": "Description of the primary target audience (2-3 sentences)",
    "marketCategory": "The market category this brand operates in",
    "competitiveAdvantage": "The primary competitive advantage or differentiator",
    "reasonToBelieve": "Why customers should believe this positioning"
  }},
  "mission": {{
    "statement": "A concise, inspiring mission statement (1-2 sentences)",
    "explanation": "Brief explanation of the mission's meaning and importance"
  }},
  "vision": {{
    "statement": "An aspirational vision statement describing the future state",
    "timeframe": "Implied timeframe for this vision"
  }},
  "brandPromise": {{
    "promise": "The core promise the brand makes to customers",
    "delivery": "How the brand delivers on this promise"
  }},
  "boilerplate": "A 3-4 sentence company description suitable for press releases and formal communications"
}}

Ensure all content is:
1. Specific to {name} and their apparent focus
2. Professional and sophisticated in tone
3. Actionable and meaningful (not generic platitudes)
4. Consistent with the messaging found on their website"""


def get_brand_personality_prompt(analysis: AnalysisResult) -> str:
    content_summary = generate_content_summary(analysis.content)
    name = analysis.brand_name

    return f"""Based on the website analysis for "{name}", generate brand personality attributes.

WEBSITE ANALYSIS:
Brand: {name}
Industry: {_or(analysis.industry, 'Not determined')}
Tagline: {_or(analysis.tagline, 'None found')}

CONTENT SUMMARY:
{content_summary}

Generate brand personality as JSON:

{{
  "personalityTraits": [
    {{
      "trait": "Primary personality trait (one word)",
      "description": "What this means for the brand (1-2 sentences)",
      "behaviors": ["How this manifests in brand behavior", "Another behavioral example", "Third example"]
    }}
    // Include exactly 5 personality traits
  ],
  "brandArchetype": {{
    "primary": "The primary brand archetype (e.g., Hero, Creator, Sage, Explorer, etc.)",
    "secondary": "A secondary archetype that influences the brand",
    "description": "How these archetypes manifest in the brand's personality"
  }}
}}

The personality traits should:
1. Be derived from the tone and content of the website
2. Feel authentic to what {name} represents
3. Be distinct and not overlap significantly
4. Include both emotional and functional attributes"""


def get_messaging_framework_prompt(analysis: AnalysisResult) -> str:
    content_summary = generate_content_summary(analysis.content)
    name = analysis.brand_name
    value_props = "\n".join(
        f"{i}. {v}" for i, v in enumerate(analysis.content.value_props[:5], start=1)
    )
    ctas = ", ".join(analysis.content.ctas[:5])

    return f"""Based on the website analysis for "{name}", create a comprehensive messaging framework.

WEBSITE ANALYSIS:
Brand: {name}
Industry: {_or(analysis.industry, 'Not determined')}
Tagline: {_or(analysis.tagline, 'None found')}

CONTENT SUMMARY:
{content_summary}

VALUE PROPOSITIONS FOUND:
{_or(value_props, 'None extracted')}

CALLS TO ACTION FOUND:
{_or(ctas, 'None extracted')}

Generate the messaging framework as JSON:

{{
  "brandPillars": [
    {{
      "name": "Short pillar name (2-4 words)",
      "description": "What this pillar represents (2-3 sentences)",
      "proofPoints": ["Specific evidence/capability", "Another proof point", "Third proof point"]
    }}
    // Include exactly 3 brand pillars
  ],
  "valuePropositions": [
    {{
      "headline": "Compelling value proposition headline",
      "subheadline": "Supporting statement that elaborates on the value",
      "audience": "Which audience segment this resonates with most"
    }}
    // Include 3-4 value propositions
  ],
  "keyMessages": [
    {{
      "message": "A key message statement",
      "context": "When/where to use this message",
      "audience": "Target audience for this message"
    }}
    // Include 5-6 key messages
  ],
  "elevator": {{
    "15second": "A 15-second elevator pitch (2-3 sentences)",
    "30second": "A 30-second elevator pitch (4-5 sentences)",
    "60second": "A 60-second pitch with more detail"
  }}
}}

Ensure messaging:
1. Is rooted in the actual content found on {name}'s website
2. Addresses clear customer pain points or needs
3. Differentiates from generic industry messaging
4. Uses language consistent with the brand's apparent voice"""


def get_voice_tone_prompt(analysis: AnalysisResult) -> str:
    content = analysis.content
    sample_content = "\n\n".join(
        filter(None, [content.hero_heading, content.hero_subtext, *content.paragraphs[:3]])
    )
    name = analysis.brand_name

    return f"""Based on the website content for "{name}", define voice and tone guidelines.

SAMPLE CONTENT FROM WEBSITE:
{_or(sample_content, 'Limited content available')}

CTAs AND HEADINGS:
{chr(10).join(content.headings[:10])}
{', '.join(content.ctas[:5])}

Generate voice and tone guidelines as JSON:

{{
  "voiceAttributes": [
    {{
      "attribute": "Voice attribute (e.g., Confident, Approachable)",
      "description": "What this means for the brand voice",
      "doExample": "Example of content that embodies this",
      "dontExample": "Example of what to avoid"
    }}
    // Include 4-5 voice attributes
  ],
  "toneSpectrum": [
    {{
      "dimension": "Dimension name (e.g., Formal vs. Casual)",
      "position": 65,
      "description": "Where the brand sits on this spectrum and why"
    }}
    // Include 4 tone spectrum dimensions: Formal/Casual, Serious/Playful, Technical/Simple, Reserved/Enthusiastic
  ],
  "writingStyle": {{
    "sentenceLength": "Guidance on sentence length",
    "vocabulary": "Guidance on vocabulary choices",
    "punctuation": "Notes on punctuation style",
    "formatting": "Preferences for formatting content"
  }},
  "styleRules": [
    {{
      "category": "Category (e.g., Grammar, Capitalization, Numbers)",
      "rule": "The specific rule",
      "example": "Example of correct usage"
    }}
    // Include 6-8 style rules
  ]
}}

The voice and tone should:
1. Be derived from actual writing patterns on the website
2. Feel achievable and maintainable for content creators
3. Distinguish {name} from competitors
4. Be specific enough to guide real writing decisions"""


def get_typography_guidelines_prompt(analysis: AnalysisResult) -> str:
    fonts = analysis.fonts
    font_info = "\n".join(
        f"{f.family} ({f.category.value}, used for {f.usage.value}, weights: {', '.join(f.weights) or 'default'})"
        for f in fonts
    )
    primary = fonts[0] if fonts else None
    secondary = fonts[1] if len(fonts) > 1 else primary

    primary_name = primary.family if primary else 'Inter'
    primary_weights = primary.weights if primary and primary.weights else ['400', '500', '600', '700']
    secondary_name = secondary.family if secondary else 'Inter'
    secondary_weights = (
        fonts[1].weights if len(fonts) > 1 and fonts[1].weights else ['400', '600']
    )

    return f"""Based on the typography detected on "{analysis.brand_name}"'s website, create typography guidelines.

DETECTED FONTS:
{_or(font_info, 'No specific fonts detected')}

Generate typography guidelines as JSON:

{{
  "primaryTypeface": {{
    "name": {json.dumps(primary_name)},
    "usage": "Primary usage description",
    "weights": {json.dumps(primary_weights)},
    "characteristics": "What makes this typeface appropriate for the brand"
  }},
  "secondaryTypeface": {{
    "name": {json.dumps(secondary_name)},
    "usage": "Secondary usage description",
    "weights": {json.dumps(secondary_weights)},
    "characteristics": "How this complements the primary typeface"
  }},
  "hierarchy": {{
    "h1": {{ "size": "48-64px", "weight": "700", "lineHeight": "1.1", "usage": "Page titles and hero headings" }},
    "h2": {{ "size": "36-40px", "weight": "600", "lineHeight": "1.2", "usage": "Section headings" }},
    "h3": {{ "size": "24-28px", "weight": "600", "lineHeight": "1.3", "usage": "Subsection headings" }},
    "h4": {{ "size": "18-20px", "weight": "600", "lineHeight": "1.4", "usage": "Card titles and labels" }},
    "body": {{ "size": "16px", "weight": "400", "lineHeight": "1.6", "usage": "Paragraph text and general content" }},
    "small": {{ "size": "14px", "weight": "400", "lineHeight": "1.5", "usage": "Captions, labels, and secondary text" }}
  }},
  "guidelines": [
    "Specific typography guideline",
    "Another guideline"
    // Include 4-6 guidelines
  ]
}}"""


def get_color_guidelines_prompt(analysis: AnalysisResult) -> str:
    colors = analysis.colors
    color_info = "\n".join(f"{c.name} ({c.hex}) - {c.usage.value}" for c in colors)

    background = colors[0].hex if colors else '#FFFFFF'
    text = next((c.hex for c in colors if c.usage == ColorUsage.TEXT), '#070D59')
    accent = next((c.hex for c in colors if c.usage == ColorUsage.ACCENT), '#0066FF')

    return f"""Based on the colors detected on "{analysis.brand_name}"'s website, create color usage guidelines.

DETECTED COLORS:
{_or(color_info, 'Limited colors detected')}

Generate color guidelines as JSON:

{{
  "colorPrinciples": [
    "Guiding principle for color usage",
    "Another principle"
    // Include 3-4 principles
  ],
  "primaryUsage": {{
    "backgrounds": ["When to use which colors for backgrounds"],
    "text": ["Text color guidelines"],
    "accents": ["How to use accent colors"],
    "interactive": ["Colors for buttons, links, and interactive elements"]
  }},
  "combinations": [
    {{
      "name": "Combination name (e.g., Primary Light)",
      "background": "{background}",
      "text": "{text}",
      "accent": "{accent}",
      "usage": "When to use this combination"
    }}
    // Include 3-4 color combinations
  ],
  "accessibility": {{
    "minimumContrast": "4.5:1 for normal text, 3:1 for large text",
    "guidelines": ["Accessibility guideline", "Another guideline"]
  }}
}}"""


def get_logo_guidelines_prompt(analysis: AnalysisResult) -> str:
    return f"""Based on the brand analysis for "{analysis.brand_name}", create logo usage guidelines.

BRAND CONTEXT:
Name: {analysis.brand_name}
Industry: {_or(analysis.industry, 'Not specified')}

Generate logo guidelines as JSON:

{{
  "logoVersions": [
    {{ "name": "Primary Logo", "usage": "Main logo for most applications", "background": "Light backgrounds" }},
    {{ "name": "Reversed Logo", "usage": "For dark backgrounds", "background": "Dark backgrounds" }},
    {{ "name": "Icon/Mark", "usage": "Favicon, app icon, small spaces", "background": "Any" }},
    {{ "name": "Horizontal Lockup", "usage": "Wide format applications", "background": "Light backgrounds" }}
  ],
  "clearSpace": {{
    "rule": "Maintain clear space equal to the height of the logomark on all sides",
    "minimumSize": "The logo should never appear smaller than 24px in height for digital or 0.5 inches for print"
  }},
  "donts": [
    "Don't stretch or distort the logo",
    "Don't change the logo colors outside of approved versions",
    "Don't add effects like shadows or gradients",
    "Don't place the logo on busy backgrounds",
    "Don't rotate the logo",
    "Don't rearrange logo elements"
  ],
  "placement": {{
    "preferred": ["Top left of documents", "Center of presentations", "Above the fold on websites"],
    "cobranding": "When appearing with partner logos, maintain equal visual weight and clear separation"
  }}
}}"""


def get_appositive_prompt(analysis: AnalysisResult) -> str:
    name = analysis.brand_name
    return f"""Generate a list of descriptive appositives (descriptive phrases) for "{name}" that can be used in various communications.

BRAND CONTEXT:
Name: {name}
Industry: {_or(analysis.industry, 'Not specified')}
Tagline: {_or(analysis.tagline, 'None')}

Generate appositives as JSON:

{{
  "appositives": [
    {{
      "phrase": "a leading [industry] company",
      "usage": "Formal communications and press releases",
      "tone": "Professional"
    }}
    // Include 6-8 appositives with varying tones (professional, conversational, bold, etc.)
  ]
}}

The appositives should:
1. Be versatile for different communication contexts
2. Highlight different aspects of the brand
3. Range from formal to conversational
4. Be authentic to what {name} actually does"""

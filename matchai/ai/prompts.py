"""Prompt templates for the generative model."""

from matchai.profile.models import Profile


def compatibility_prompt(a: Profile, b: Profile) -> str:
    return (
        "Analyze the compatibility between these two professional profiles "
        "for networking/mentorship matching.\n\n"
        f"PROFILE 1:\n{a.to_prompt_string()}\n\n"
        f"PROFILE 2:\n{b.to_prompt_string()}\n\n"
        "Respond with ONLY a JSON object (no markdown) containing:\n"
        '- "compatibility_score": integer 0-100\n'
        '- "shared_interests": array of common interests\n'
        '- "complementary_skills": array of skills profile 1 offers that profile 2 lacks\n'
        '- "goal_alignment": float 0.0-1.0, how well their goals align\n'
        '- "explanation": 2-3 sentences on why they are compatible\n'
        '- "conversation_starters": array of exactly 3 conversation starters\n\n'
        "Focus on professional networking value, mentorship opportunities, and mutual benefit."
    )


def starters_prompt(a: Profile, b: Profile, shared: list[str]) -> str:
    def line(p: Profile) -> str:
        return (
            f"{p.full_name or 'A professional'} - {p.position or 'Professional'} "
            f"at {p.company or 'their company'}"
        )

    return (
        "Generate exactly 3 conversation starters for two professionals who just matched. "
        "Return ONLY a valid JSON array with no additional text or formatting.\n\n"
        f"Person 1: {line(a)}\n"
        f"Person 2: {line(b)}\n"
        f"Shared interests: {', '.join(shared) if shared else 'Professional networking'}\n\n"
        "Requirements:\n"
        "- Professional but friendly tone\n"
        "- Reference shared interests or complementary expertise\n"
        "- Open-ended to encourage dialogue\n"
        "- Each starter should be 15-25 words\n\n"
        'Return format: ["starter 1", "starter 2", "starter 3"]'
    )


def summary_prompt(profile: Profile) -> str:
    return (
        "Create a concise, professional summary for this user profile:\n\n"
        f"{profile.to_prompt_string()}\n\n"
        "Write 1-2 sentences highlighting their key strengths, expertise, and what they "
        "bring to networking opportunities. Respond with the summary text only."
    )


def enhanced_summary_prompt(profile: Profile) -> str:
    return (
        "Create an enhanced professional profile analysis for this user:\n\n"
        f"{profile.to_prompt_string()}\n\n"
        "Respond with ONLY a JSON object containing:\n"
        '- "summary": 1-2 sentence professional summary\n'
        '- "key_strengths": array of 3-4 key strengths\n'
        '- "networking_value": 1 sentence about what they bring to networking\n'
        '- "suggested_connections": array of 3 types of people they should connect with'
    )


def insights_prompt(profile: Profile) -> str:
    return (
        "Generate 3 networking insights for this professional:\n\n"
        f"{profile.to_prompt_string()}\n\n"
        "Each insight should be actionable, based on their profile, and 1-2 sentences.\n"
        'Return exactly 3 insights as a JSON array: ["insight 1", "insight 2", "insight 3"]'
    )

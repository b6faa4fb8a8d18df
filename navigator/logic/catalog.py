"""
Visa Catalog

Static definitions for the major U.S. visa categories covered by the navigator.
Sources: USCIS.gov, State Department. Update this table whenever visa rules
change; it is loaded once into a VisaKnowledgeBase at startup.
"""

from typing import List

from .contracts import EligibilityRule, NextStep, VisaDefinition


_FOREIGN_NATIONAL = EligibilityRule(
    field="citizenship_restriction_category",
    operator="excludes",
    value=["usNational"],
    description="Must be a foreign national (not U.S. citizen/national)",
)


VISA_CATALOG: List[VisaDefinition] = [
    # =========================================================================
    # STARTING POINT (for users without a visa)
    # =========================================================================
    VisaDefinition(
        id="start",
        code="START",
        name="Starting Point",
        short_description="Begin your U.S. visa journey",
        category="special",
        tier="start",
        common_next_steps=[
            NextStep(visa_id="f1", reason="Study at a U.S. university"),
            NextStep(visa_id="j1", reason="Participate in exchange programs"),
            NextStep(visa_id="esta", reason="Short visit under the Visa Waiver Program"),
        ],
        time_horizon="short",
        difficulty=1,
        estimated_total_time="N/A",
        notes="Placeholder node for users who have not yet obtained a U.S. visa.",
    ),

    # =========================================================================
    # ENTRY-LEVEL: Students, exchange visitors and short visits
    # =========================================================================
    VisaDefinition(
        id="f1",
        code="F-1",
        name="F-1 Student Visa",
        short_description="Study at a U.S. university or college",
        category="student",
        tier="entry",
        eligibility_rules=[
            EligibilityRule(
                field="education_level",
                operator="gte",
                value=1,
                description="High school diploma or equivalent required",
            ),
            EligibilityRule(
                field="english_proficiency",
                operator="gte",
                value=2,
                description="English proficiency (TOEFL/IELTS) typically required",
            ),
            _FOREIGN_NATIONAL,
        ],
        common_next_steps=[
            NextStep(visa_id="opt", reason="After graduation to gain work experience"),
            NextStep(visa_id="h1b", reason="After OPT to transition to permanent work visa"),
            NextStep(visa_id="eb2gc", reason="Long-term: Through employer sponsorship for green card"),
        ],
        common_previous_visas=["b2"],
        time_horizon="short",
        difficulty=1,
        estimated_total_time="4-8 weeks",
        notes="On-campus work up to 20 hours/week during school. Eligible for OPT after graduation.",
    ),
    VisaDefinition(
        id="j1",
        code="J-1",
        name="J-1 Exchange Visitor Visa",
        short_description="Participate in educational exchange programs",
        category="student",
        tier="entry",
        eligibility_rules=[
            EligibilityRule(
                field="education_level",
                operator="gte",
                value=1,
                description="High school diploma or equivalent",
            ),
            _FOREIGN_NATIONAL,
        ],
        common_next_steps=[
            NextStep(visa_id="h1b", reason="Transition to work visa after exchange program"),
        ],
        time_horizon="short",
        difficulty=1,
        estimated_total_time="4-8 weeks",
        notes="Some J-1 visas carry a two-year home country residency requirement.",
    ),
    VisaDefinition(
        id="b2",
        code="B-2",
        name="B-2 Tourist Visa",
        short_description="Visit the U.S. as a tourist or for short-term purposes",
        category="visitor",
        tier="entry",
        eligibility_rules=[_FOREIGN_NATIONAL],
        time_horizon="short",
        difficulty=1,
        estimated_total_time="2-4 weeks",
        notes="B-2 holders cannot work in the U.S. Maximum initial stay is 6 months.",
    ),
    VisaDefinition(
        id="esta",
        code="VWP",
        name="Visa Waiver Program (ESTA)",
        short_description="Visit for up to 90 days without a visa",
        category="tourist",
        tier="entry",
        eligibility_rules=[
            EligibilityRule(
                field="citizenship_restriction_category",
                operator="eq",
                value="unrestricted",
                description="Citizen of a Visa Waiver Program country",
            ),
        ],
        time_horizon="short",
        difficulty=1,
        estimated_total_time="Up to 72 hours",
        notes="No change or extension of status is possible under the VWP.",
    ),

    # =========================================================================
    # INTERMEDIATE: Work experience & training
    # =========================================================================
    VisaDefinition(
        id="opt",
        code="OPT",
        name="Optional Practical Training",
        short_description="Work experience after F-1 graduation",
        category="worker",
        tier="intermediate",
        eligibility_rules=[
            EligibilityRule(
                field="previous_visa",
                operator="eq",
                value="f1",
                description="Must be F-1 student who completed degree",
            ),
            EligibilityRule(
                field="education_level",
                operator="gte",
                value=2,
                description="At least bachelors degree completed",
            ),
        ],
        common_next_steps=[
            NextStep(visa_id="h1b", reason="Transition to H-1B work visa for continued employment"),
        ],
        common_previous_visas=["f1"],
        time_horizon="short",
        difficulty=1,
        estimated_total_time="3-4 months",
        notes="STEM graduates can extend OPT to 36 months total.",
    ),
    VisaDefinition(
        id="h1b",
        code="H-1B",
        name="H-1B Specialty Occupation Worker Visa",
        short_description="Work in the U.S. in specialty occupation roles",
        category="worker",
        tier="intermediate",
        eligibility_rules=[
            EligibilityRule(
                field="education_level",
                operator="gte",
                value=2,
                description="Bachelor's degree or higher required",
            ),
            EligibilityRule(
                field="english_proficiency",
                operator="gte",
                value=2,
                description="Good English proficiency required",
            ),
            _FOREIGN_NATIONAL,
        ],
        common_next_steps=[
            NextStep(visa_id="l1b", reason="Alternative work visa for intracompany transfer"),
            NextStep(visa_id="eb2gc", reason="Green card sponsorship after working 1-2 years"),
        ],
        common_previous_visas=["f1", "opt", "j1"],
        time_horizon="medium",
        difficulty=2,
        estimated_total_time="3-6 months",
        notes="Annual cap of 65,000 + 20,000 advanced degree exemption. Lottery when oversubscribed.",
    ),
    VisaDefinition(
        id="l1b",
        code="L-1B",
        name="L-1B Intracompany Transfer (Specialized Knowledge)",
        short_description="Transfer to U.S. office with specialized company knowledge",
        category="worker",
        tier="intermediate",
        eligibility_rules=[
            EligibilityRule(
                field="years_of_experience",
                operator="gte",
                value=1,
                description="At least 1 year with company abroad",
            ),
            EligibilityRule(
                field="english_proficiency",
                operator="gte",
                value=2,
                description="Good English proficiency",
            ),
        ],
        common_next_steps=[
            NextStep(visa_id="eb1c", reason="Green card sponsorship as intracompany transferee manager"),
        ],
        time_horizon="medium",
        difficulty=2,
        estimated_total_time="2-4 months",
        notes="No annual cap. Valid for up to 5 years.",
    ),
    VisaDefinition(
        id="o1",
        code="O-1",
        name="O-1 Individual of Extraordinary Ability",
        short_description="Work visa for individuals with extraordinary ability",
        category="worker",
        tier="advanced",
        eligibility_rules=[
            EligibilityRule(
                field="english_proficiency",
                operator="gte",
                value=2,
                description="English proficiency required",
            ),
        ],
        common_next_steps=[
            NextStep(visa_id="eb1a", reason="Green card as extraordinary ability immigrant"),
        ],
        time_horizon="long",
        difficulty=3,
        estimated_total_time="2-4 months",
        notes="No numerical limitations. Requires substantial evidence of sustained acclaim.",
    ),

    # =========================================================================
    # FAMILY
    # =========================================================================
    VisaDefinition(
        id="k1",
        code="K-1",
        name="K-1 Fiance(e) Visa",
        short_description="Enter the U.S. to marry a U.S. citizen",
        category="family",
        tier="intermediate",
        eligibility_rules=[_FOREIGN_NATIONAL],
        common_next_steps=[
            NextStep(visa_id="us_citizenship", reason="After adjustment of status and 3 years of marriage"),
        ],
        time_horizon="medium",
        difficulty=2,
        estimated_total_time="6-9 months",
        notes="Marriage must take place within 90 days of entry.",
    ),

    # =========================================================================
    # ADVANCED: Investment
    # =========================================================================
    VisaDefinition(
        id="eb5",
        code="EB-5",
        name="Employment-Based Fifth Preference (Investor)",
        short_description="Green card through U.S. investment and job creation",
        category="investor",
        tier="advanced",
        eligibility_rules=[
            EligibilityRule(
                field="investment_amount",
                operator="gte",
                value=787500,
                description="Investment of at least $787,500 (TEA) or $1,050,000",
            ),
        ],
        common_next_steps=[
            NextStep(visa_id="us_citizenship", reason="Path to U.S. citizenship after 5 years"),
        ],
        time_horizon="long",
        difficulty=3,
        estimated_total_time="2-4 years",
        notes="Investment must create at least 10 full-time U.S. jobs.",
    ),

    # =========================================================================
    # ADVANCED: Employment-based green cards
    # =========================================================================
    VisaDefinition(
        id="eb2gc",
        code="EB-2",
        name="Employment-Based Second Preference Green Card",
        short_description="Green card through employer sponsorship with advanced degree",
        category="immigrant",
        tier="advanced",
        eligibility_rules=[
            EligibilityRule(
                field="education_level",
                operator="gte",
                value=3,
                description="Master's degree or equivalent work experience",
            ),
            EligibilityRule(
                field="years_of_experience",
                operator="gte",
                value=2,
                description="At least 2 years relevant work experience",
            ),
        ],
        common_next_steps=[
            NextStep(visa_id="us_citizenship", reason="Path to U.S. citizenship after 5 years"),
        ],
        common_previous_visas=["h1b", "opt", "l1b"],
        time_horizon="long",
        difficulty=2,
        estimated_total_time="2-4 years",
        notes="Retrogressed for most countries; waiting times vary by country of birth.",
    ),
    VisaDefinition(
        id="eb1a",
        code="EB-1A",
        name="Employment-Based First Preference (Extraordinary Ability)",
        short_description="Green card as person of extraordinary ability",
        category="immigrant",
        tier="advanced",
        eligibility_rules=[
            EligibilityRule(
                field="english_proficiency",
                operator="gte",
                value=2,
                description="English proficiency",
            ),
        ],
        common_next_steps=[
            NextStep(visa_id="us_citizenship", reason="Path to U.S. citizenship after 5 years"),
        ],
        common_previous_visas=["o1"],
        time_horizon="long",
        difficulty=3,
        estimated_total_time="1-2 years",
        notes="No labor certification required.",
    ),
    VisaDefinition(
        id="eb1c",
        code="EB-1C",
        name="Employment-Based First Preference (Multinational Manager/Executive)",
        short_description="Green card as manager/executive through intracompany transfer",
        category="immigrant",
        tier="advanced",
        eligibility_rules=[
            EligibilityRule(
                field="years_of_experience",
                operator="gte",
                value=1,
                description="At least 1 year as manager/executive abroad",
            ),
        ],
        common_next_steps=[
            NextStep(visa_id="us_citizenship", reason="Path to U.S. citizenship after 5 years"),
        ],
        common_previous_visas=["l1b"],
        time_horizon="long",
        difficulty=2,
        estimated_total_time="1-2 years",
        notes="Requires 1 year of employment abroad within the 3 years preceding the petition.",
    ),

    # =========================================================================
    # ENDPOINT: Citizenship
    # =========================================================================
    VisaDefinition(
        id="us_citizenship",
        code="NATURALIZATION",
        name="U.S. Citizenship",
        short_description="Become a U.S. citizen",
        category="immigrant",
        tier="advanced",
        eligibility_rules=[
            EligibilityRule(
                field="years_of_experience",
                operator="gte",
                value=5,
                description="At least 5 years as permanent resident (green card)",
            ),
            EligibilityRule(
                field="english_proficiency",
                operator="gte",
                value=2,
                description="English proficiency required",
            ),
        ],
        common_previous_visas=["eb2gc", "eb1a", "eb1c", "eb5", "k1"],
        time_horizon="long",
        difficulty=1,
        estimated_total_time="8-12 months",
        notes="3-year requirement for those married to a U.S. citizen.",
    ),
]

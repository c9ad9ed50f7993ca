"""
Pattern tables for document classification.

Lists of ``r''`` strings are regular expressions, matched case-insensitively
(structural indicators are line-anchored and case-sensitive). Lists of plain
strings are lowercase phrases matched as substrings of the lowercased text.
"""

# Essential privacy sections. A section counts as present when any one of
# its patterns matches.
ESSENTIAL_SECTIONS = {
    'data_collection': [
        r'information we collect',
        r'data (?:we )?collect',
        r'\bwe collect\b',
        r'collection of (?:your )?(?:personal )?(?:data|information)',
        r'data collection',
    ],
    'user_rights': [
        r'your rights',
        r'right to (?:access|delete|erasure|rectif|object|portab|know)',
        r'data subject rights',
        r'you (?:have|may have) the right',
        r'\bopt[- ]out\b',
    ],
    'third_party_sharing': [
        r'third[- ]part(?:y|ies)',
        r'share (?:your|personal|the)',
        r'disclos(?:e|ure of) (?:your|personal)',
        r'service providers',
        r'data sharing',
    ],
    'data_retention': [
        r'\bretention\b',
        r'\bretain\b',
        r'how long we (?:keep|store)',
        r'storage period',
        r'as long as (?:is )?necessary',
    ],
    'data_security': [
        r'security measures',
        r'\bencrypt',
        r'\bsafeguards?\b',
        r'protect your (?:personal )?(?:data|information)',
        r'access controls?',
        r'data security',
    ],
    'legal_compliance': [
        r'\bgdpr\b',
        r'\bccpa\b',
        r'applicable (?:laws?|regulations?)',
        r'legal obligations?',
        r'comply with',
        r'data protection (?:laws?|regulations?)',
    ],
}

# Weighted privacy vocabulary: (points per matched term, terms)
PRIVACY_TERM_TIERS = {
    'strong_privacy': (30, [
        'privacy policy', 'privacy notice', 'privacy statement',
        'data protection policy', 'cookie policy',
    ]),
    'data_protection': (20, [
        'personal data', 'personal information', 'data protection',
        'data controller', 'data processor', 'data subject',
        'processing of personal',
    ]),
    'legal_compliance': (15, [
        'gdpr', 'ccpa', 'general data protection regulation',
        'california consumer privacy act', 'hipaa', 'coppa',
        'applicable law', 'legal obligation', 'regulatory',
    ]),
    'user_rights': (12, [
        'right to access', 'right to delete', 'right to erasure',
        'right to rectification', 'data portability', 'opt-out',
        'opt out', 'withdraw consent', 'your rights',
    ]),
    'security': (10, [
        'encryption', 'security measures', 'access controls',
        'safeguards', 'data breach', 'secure',
    ]),
    'retention': (10, [
        'retention', 'retain', 'storage period', 'as long as necessary',
        'delete your',
    ]),
}

STRUCTURE_PHRASES = [
    'effective date', 'last updated', 'contact us', 'information we collect',
    'how we use', 'data sharing', 'your rights', 'changes to this policy',
    'table of contents', 'introduction', 'definitions', 'scope', 'purpose',
    'section', 'article', 'policy statement', 'responsibilities',
    'governing law',
]
STRUCTURE_POINTS = 12

QUALITY_INDICATORS = [
    'we will', 'you may', 'you have the right', 'we do not', 'for example',
    'including', 'in accordance with', 'such as',
]
QUALITY_POINTS = 5

# Phrase -> policy sub type. Declaration order decides the sub type when
# several indicators are present.
STRONG_POLICY_INDICATORS = [
    ('privacy policy', 'privacy_policy'),
    ('privacy notice', 'privacy_policy'),
    ('privacy statement', 'privacy_policy'),
    ('data protection policy', 'privacy_policy'),
    ('general data protection regulation', 'privacy_policy'),
    ('gdpr', 'privacy_policy'),
    ('ccpa', 'privacy_policy'),
    ('cookie policy', 'cookie_policy'),
    ('terms of service', 'terms_of_service'),
    ('terms and conditions', 'terms_of_service'),
    ('terms of use', 'terms_of_service'),
    ('code of conduct', 'code_of_conduct'),
    ('code of ethics', 'code_of_conduct'),
    ('acceptable use policy', 'acceptable_use_policy'),
    ('information security policy', 'security_policy'),
    ('data processing agreement', 'data_processing_agreement'),
    ('human rights policy', 'human_rights_policy'),
    ('employee handbook', 'employee_handbook'),
    ('whistleblower policy', 'compliance_policy'),
    ('anti-bribery', 'compliance_policy'),
    ('refund policy', 'refund_policy'),
]

# Non-policy categories checked for fast rejection, in priority order.
NON_POLICY_PATTERNS = {
    'resume': [
        r'professional experience',
        r'career objective',
        r'references available',
        r'work (?:history|experience)',
        r'employment history',
        r'curriculum vitae',
        r'core competencies',
        r'(?:bachelor|master)(?:\'s)? (?:of|in|degree)',
        r'\d+\+? years (?:of )?experience',
    ],
    'personal': [
        r'dear hiring manager',
        r'cover letter',
        r'i am writing to (?:apply|express)',
        r'i am excited to apply',
        r'to whom it may concern',
        r'dear sir or madam',
        r'thank you for considering my',
    ],
    'academic': [
        r'\babstract\b',
        r'literature review',
        r'research questions?',
        r'\bhypothes[ie]s\b',
        r'\bbibliography\b',
        r'\bet al\.',
        r'\bthesis\b',
    ],
    'marketing': [
        r'limited time offer',
        r'\d+% off',
        r'\bact now\b',
        r'\bbuy now\b',
        r'exclusive deals?',
        r'special offer',
        r'free shipping',
        r'money back guarantee',
        r'\b(?:promo|discount|coupon) code\b',
        r'\buse code \w+',
    ],
    'financial': [
        r'balance sheet',
        r'income statement',
        r'cash flow statement',
        r'earnings per share',
        r'\bnet income\b',
        r'fiscal (?:year|quarter)',
        r'invoice (?:number|no\.?)',
        r'amount due',
    ],
}

# PDF path: generic non-business vocabulary and decisive resume phrases.
NON_BUSINESS_PATTERNS = [
    r'\bresume\b',
    r'curriculum vitae',
    r'cover letter',
    r'dear hiring manager',
    r'\bskills\s*:',
    r'\beducation\s*:',
    r'\breferences\b',
    r'\bobjective\s*:',
    r'\bhobbies\b',
]

STRONG_RESUME_PATTERNS = [
    r'professional experience',
    r'career objective',
    r'employment history',
    r'references available upon request',
]

GENERIC_POLICY_PATTERNS = [
    r'\bpolicy\b',
    r'\bprocedures?\b',
    r'\bcompliance\b',
    r'\bemployees?\b',
    r'\b(?:must|shall)\b',
    r'\bresponsib(?:le|ility|ilities)\b',
    r'\bguidelines?\b',
    r'\bstandards?\b',
]
GENERIC_POLICY_POINTS = 8

STRUCTURAL_INDICATORS = [
    r'^\s*\d+(?:\.\d+)*\.?\s+[A-Z]',
    r'^\s*(?i:section|article|part)\s+\d+',
    r'^\s*[A-Z][A-Za-z ,&]{3,60}:?\s*$',
    r'^\s*[-*•]\s+\w',
]
STRUCTURAL_INDICATOR_POINTS = 10

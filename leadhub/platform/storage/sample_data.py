SAMPLE_LEADS = [
    {
        "name": "Sarah Johnson",
        "email": "sarah.johnson@email.com",
        "phone": "+1 (555) 123-4567",
        "source": "LinkedIn Quiz",
        "status": "hot",
        "score": 95,
        "tags": ["fitness", "premium"],
    },
    {
        "name": "Mike Chen",
        "email": "mike.chen@company.com",
        "phone": "+1 (555) 234-5678",
        "source": "Facebook Lead Magnet",
        "status": "warm",
        "score": 78,
        "tags": ["business", "startup"],
    },
    {
        "name": "Emma Davis",
        "email": "emma.davis@email.com",
        "phone": "+1 (555) 345-6789",
        "source": "Instagram Story",
        "status": "cold",
        "score": 45,
        "tags": ["health"],
    },
]

SAMPLE_LEAD_MAGNETS = [
    {
        "title": "Ultimate Fitness Challenge Guide",
        "type": "eBook",
        "industry": "Fitness",
        "description": "A comprehensive guide to fitness challenges",
        "status": "active",
        "leads": 234,
        "conversion": 24,
    },
    {
        "title": "What's Your Investment Style?",
        "type": "Quiz",
        "industry": "Finance",
        "description": "Interactive quiz to determine investment style",
        "status": "active",
        "leads": 189,
        "conversion": 31,
    },
]

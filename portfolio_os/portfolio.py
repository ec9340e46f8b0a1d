# ---------- Portfolio data ----------
PERSONAL = {
    "name": "Akshaj",
    "initials": "A",
    "title": "CS Graduate Student - Full-Stack & AI/ML Engineer",
    "location": "Chicago, IL - University of Illinois Chicago",
    "bio": [
        "I'm a Master's student in Computer Science at UIC, passionate about building scalable "
        "distributed systems and intelligent applications. My experience spans AI/ML engineering, "
        "full-stack development, cybersecurity, and cloud architecture.",
        "Previously, I co-founded ESWAF Building Solutions, a construction technology startup in "
        "Chennai, India, where I built distributed systems handling high-volume transactions. I "
        "believe technology should be accessible to everyone, which led me to develop an SMS-based "
        "AI platform for rural communities without smartphones.",
    ],
    "stats": [("M.S.", "CS @ UIC"), ("5+", "Languages"), ("inf", "Curiosity")],
    "links": {
        "github": "https://github.com/realAkshaj",
        "linkedin": "https://www.linkedin.com/in/akshajks/",
        "email": "akshaj32@gmail.com",
        "email_alt": "akurr@uic.edu",
        "website": "https://akshajks.com",
    },
}

PROJECTS = [
    {
        "name": "AI Content Management System",
        "description": "A full-stack AI-powered CMS for multi-tenant content workflows, with Gemini "
                       "article generation, SEO optimization, quality scoring, JWT auth and RBAC.",
        "tag": "Full-Stack",
        "tech": ["Next.js", "Express", "PostgreSQL", "Gemini AI", "JWT"],
        "link": "https://ai-cms-platform-web.vercel.app",
    },
    {
        "name": "LLM Conversational Agent",
        "description": "Multi-turn conversational agent chaining AWS Lambda (Titan Text Lite) with "
                       "local Ollama (LLaMA 3.2) behind Akka HTTP microservices.",
        "tag": "AI/ML",
        "tech": ["Scala", "AWS Lambda", "Ollama", "Akka HTTP", "Docker"],
        "link": "https://github.com/realAkshaj/LLM-Microservice",
    },
    {
        "name": "Distributed Telemetry Pipeline",
        "description": "High-throughput pipeline for real-time telemetry ingestion, processing and "
                       "visualization with fault tolerance and horizontal scaling.",
        "tag": "Systems",
        "tech": ["Go", "Kafka", "Kubernetes", "InfluxDB", "Grafana"],
    },
    {
        "name": "ML Training Infrastructure",
        "description": "Scalable training infrastructure on AWS for model training, hyperparameter "
                       "tuning and experiment tracking.",
        "tag": "AI/ML",
        "tech": ["Python", "PyTorch", "AWS SageMaker", "Docker", "MLflow"],
    },
    {
        "name": "Toxicity Detection Research",
        "description": "Research on AI-driven toxicity detection using RealToxicityPrompts and "
                       "ToxiGen, analysing bias patterns in large language models.",
        "tag": "AI/ML",
        "tech": ["Python", "Transformers", "NLP", "Jupyter"],
    },
    {
        "name": "SMS-Based AI Platform",
        "description": "AI services for rural communities without smartphones, delivered over SMS.",
        "tag": "Social Impact",
        "tech": ["Python", "Twilio", "LLMs", "REST APIs"],
    },
]

SKILLS = [
    ("Python", 95, (249, 226, 175)),
    ("Java", 88, (243, 139, 168)),
    ("JavaScript/TypeScript", 90, (166, 227, 161)),
    ("Go", 82, (137, 180, 250)),
    ("React / Next.js", 85, (137, 220, 235)),
    ("AWS / Cloud", 88, (250, 179, 135)),
    ("Docker / Kubernetes", 80, (203, 166, 247)),
    ("PyTorch / ML", 85, (245, 194, 231)),
    ("SQL / NoSQL", 87, (148, 226, 213)),
    ("Distributed Systems", 86, (137, 180, 250)),
]

EXPERTISE = [
    "Full-Stack Development",
    "AI/ML Engineering",
    "Distributed Systems",
    "Cloud Architecture (AWS)",
    "Cybersecurity",
    "Data Engineering",
]

EXPERIENCE = [
    {
        "role": "Co-Founder & Software Developer",
        "company": "ESWAF Building Solutions",
        "location": "Chennai, India",
        "date": "Jun. 2022 - Dec. 2023",
        "summary": "Co-founded a construction technology startup and led full-stack development "
                   "across the entire product lifecycle.",
        "bullets": [
            "Built Python and Java microservices processing 50K+ daily transactions at 99.9% uptime, "
            "cutting API latency 65% (800ms to 280ms)",
            "Shipped React/TypeScript frontends with RESTful backends at 95% test coverage",
            "Implemented Jenkins CI/CD with Docker, cutting deployment time 60%",
            "Reduced mean time to resolution from 45min to 8min with CloudWatch dashboards",
        ],
    },
]

EDUCATION = [
    {
        "degree": "M.S. Computer Science",
        "school": "University of Illinois Chicago (UIC)",
        "date": "Aug 2024 - May 2026 (Expected)",
        "details": "Coursework in Machine Learning on Graphs, Distributed Systems, and AI Safety.",
    },
    {
        "degree": "B.E. Computer Science & Engineering",
        "school": "S.A. Engineering College, Anna University",
        "date": "Aug 2020 - May 2024",
        "details": "Algorithms, data structures, software engineering, databases and networks.",
    },
]

"""
Mock content for the demo home page.

Stands in for the remote content source; records deliberately use different
field names per collection so the normalizer's mapper and inference paths are
both exercised.
"""

from edushelf.models.components import DisplayItem

COURSES = [
    {
        "id": f"course-{i}",
        "title": title,
        "instructor": instructor,
        "description": description,
        "imageId": image_id,
        "level": level,
        "students": students,
        "rating": rating,
    }
    for i, (title, instructor, description, image_id, level, students, rating) in enumerate(
        [
            ("Complete Web Development Bootcamp", "Angela Yu", "HTML, CSS, JavaScript and Node from scratch.", "blog-code-1", "Beginner", 12840, 4.8),
            ("Data Science with Python", "Jose Portilla", "pandas, NumPy and scikit-learn for real datasets.", "blog-tech-1", "Intermediate", 9310, 4.7),
            ("UX Design Fundamentals", "Sarah Doody", "Research, wireframes and usability testing.", "post-design-1", "Beginner", 4120, 4.6),
            ("Mobile Apps with Flutter", "Maximilian Schwarzmuller", "Cross-platform apps with a single codebase.", "post-mobile-1", "Intermediate", 6875, 4.7),
            ("Machine Learning A-Z", "Kirill Eremenko", "Regression, classification and clustering.", None, "Advanced", 15200, 4.5),
            ("Academic Writing Essentials", "Laura Brown", "Structure, citation and clear argument.", "blog-meeting-1", "Beginner", 2310, 4.4),
            ("Calculus I", "Gilbert Strang", "Limits, derivatives and integrals.", None, "Intermediate", 5400, 4.9),
            ("Public Speaking Mastery", "Chris Anderson", "Prepare and deliver talks with confidence.", "post-event-1", "Beginner", 3150, 4.6),
            ("Cloud Architecture on AWS", "Stephane Maarek", "Design resilient systems in the cloud.", None, "Advanced", 7720, 4.7),
            ("Introduction to Psychology", "Paul Bloom", "Mind, behaviour and the science behind them.", None, "Beginner", 8030, 4.8),
        ],
        start=1,
    )
]

ARTICLES = [
    {
        "id": f"post-{i}",
        "title": title,
        "author": author,
        "excerpt": excerpt,
        "imageId": image_id,
        "date": date,
        "readTime": read_time,
    }
    for i, (title, author, excerpt, image_id, date, read_time) in enumerate(
        [
            ("How to Build a Study Routine That Sticks", "Amara Okafor", "Small habits beat marathon sessions.", "blog-tech-1", "2024-03-15", 6),
            ("Note-taking Methods Compared", "Liam Chen", "Cornell, outline and mapping side by side.", "blog-code-1", "2024-03-12", 8),
            ("Preparing for Final Exams", "Sofia Rossi", "A four-week plan for exam season.", "blog-meeting-1", "2024-03-08", 5),
            ("Group Projects Without the Drama", "Noah Williams", "Roles, deadlines and honest feedback.", "post-event-1", "2024-03-02", 7),
            ("Reading Research Papers Efficiently", "Priya Natarajan", "Three passes and what to look for in each.", None, "2024-02-27", 9),
            ("Choosing Your First Programming Language", "Mateo Garcia", "It matters less than you think.", "post-mobile-1", "2024-02-20", 4),
            ("Designing Accessible Slides", "Hannah Muller", "Contrast, font size and alt text.", "post-design-1", "2024-02-14", 6),
            ("Scholarships Worth Knowing About", "Yusuf Demir", "Deadlines and eligibility at a glance.", None, "2024-02-09", 5),
            ("Balancing Work and Study", "Chloe Martin", "Planning around a part-time job.", "blog-meeting-1", "2024-02-03", 7),
            ("Citation Styles Explained", "Ethan Brooks", "APA, MLA and Chicago without tears.", None, "2024-01-28", 6),
            ("Learning Statistics Intuitively", "Mei Tanaka", "Simulations before formulas.", "blog-tech-1", "2024-01-22", 10),
            ("Staying Motivated in Online Courses", "Oliver Smith", "Accountability tricks that work.", None, "2024-01-15", 5),
            ("A Beginner's Guide to Git", "Ava Johnson", "Commits, branches and pull requests.", "blog-code-1", "2024-01-10", 8),
            ("Building a Portfolio as a Student", "Lucas Silva", "Show work, not certificates.", "post-design-1", "2024-01-04", 6),
        ],
        start=1,
    )
]

INSTRUCTORS = [
    {
        "id": f"instructor-{i}",
        "name": name,
        "role": role,
        "description": bio,
        "imageId": avatar,
        "courses": courses,
        "students": students,
        "rating": rating,
    }
    for i, (name, role, bio, avatar, courses, students, rating) in enumerate(
        [
            ("Dr. Elena Petrova", "Mathematics", "Applied maths and numerical methods.", "avatar-5", 6, "12.4k", 4.9),
            ("James Carter", "Computer Science", "Systems programming and compilers.", "avatar-2", 9, "28.1k", 4.8),
            ("Aisha Bello", "Design", "Product and interaction design.", "avatar-3", 4, "7.9k", 4.7),
            ("Marco Rossi", "Data Science", "Statistics and machine learning.", "avatar-4", 7, "19.3k", 4.8),
            ("Grace Kim", "Languages", "Academic English and writing.", "avatar-1", 5, "6.2k", 4.6),
            ("Daniel Osei", "Physics", "Mechanics and electromagnetism.", None, 3, "4.8k", 4.7),
            ("Fatima Zahra", "Chemistry", "Organic chemistry and lab practice.", None, 4, "5.5k", 4.5),
            ("Henrik Larsen", "Economics", "Micro, macro and policy.", "avatar-default", 5, "9.1k", 4.6),
            ("Isabel Moreno", "Biology", "Genetics and cell biology.", None, 6, "8.7k", 4.8),
            ("Kenji Watanabe", "Engineering", "Control systems and robotics.", None, 4, "6.9k", 4.7),
            ("Laura Schmidt", "History", "Modern European history.", None, 3, "3.2k", 4.4),
            ("Samuel Adeyemi", "Business", "Entrepreneurship and strategy.", None, 5, "11.0k", 4.6),
        ],
        start=1,
    )
]

MEMBERS = [
    {
        "id": f"user-{i}",
        "displayName": name,
        "username": username,
        "avatar": avatar,
        "role": role,
        "isOnline": online,
    }
    for i, (name, username, avatar, role, online) in enumerate(
        [
            ("Amelia Clarke", "amelia", "avatar-1", "Student", True),
            ("Ben Foster", "benf", "avatar-2", "Mentor", True),
            ("Carla Diaz", "carla.d", "avatar-3", "Student", False),
            ("Dev Patel", "devp", "avatar-4", "Teaching Assistant", True),
            ("Eva Novak", "eva", "avatar-5", "Student", True),
            ("Farid Haddad", "farid", None, "Student", False),
            ("Gina Lopez", "ginal", None, "Moderator", True),
            ("Hugo Martin", "hugo", "avatar-default", "Student", True),
            ("Ines Costa", "ines", None, "Student", False),
            ("Jonas Weber", "jonasw", None, "Mentor", True),
            ("Kara Singh", "kara", None, "Student", True),
            ("Leo Dubois", "leod", None, "Student", False),
            ("Maya Cohen", "maya", None, "Teaching Assistant", True),
            ("Nico Bianchi", "nico", None, "Student", True),
            ("Olga Ivanova", "olga", None, "Student", True),
            ("Pablo Ruiz", "pablo", None, "Student", False),
        ],
        start=1,
    )
]

CATEGORIES = [
    {"id": f"category-{i}", "name": name, "description": description, "icon": icon, "count": count}
    for i, (name, description, icon, count) in enumerate(
        [
            ("Computer Science", "Programming, algorithms and systems", "💻", 124),
            ("Mathematics", "From algebra to analysis", "📐", 86),
            ("Business", "Management, finance and marketing", "📊", 97),
            ("Design", "UX, graphics and product", "🎨", 58),
            ("Languages", "Academic writing and foreign languages", "🗣️", 73),
            ("Science", "Physics, chemistry and biology", "🔬", 110),
            ("Humanities", "History, philosophy and literature", "📜", 64),
            ("Health", "Medicine, nutrition and wellbeing", "🩺", 41),
            ("Engineering", "Mechanical, electrical and civil", "⚙️", 69),
            ("Personal Development", "Study skills and productivity", None, 35),
        ],
        start=1,
    )
]

TESTIMONIALS = [
    {
        "id": "testimonial-1",
        "quote": "The course recommendations on the home page got me through my first year.",
        "author": "Amelia Clarke",
        "programme": "BSc Computer Science",
    },
    {
        "id": "testimonial-2",
        "quote": "Having all my materials in one place saved me hours every week.",
        "author": "Dev Patel",
        "programme": "MSc Data Science",
    },
    {
        "id": "testimonial-3",
        "quote": "The instructors are approachable and the articles are genuinely useful.",
        "author": "Eva Novak",
        "programme": "BA Design",
    },
    {
        "id": "testimonial-4",
        "quote": "I found a study group through the community section within a day.",
        "author": "Hugo Martin",
        "programme": "BSc Economics",
    },
]


def course_mapper(course: dict) -> DisplayItem:
    return DisplayItem(
        id=course["id"],
        title=course["title"],
        subtitle=f"with {course['instructor']}",
        description=course["description"],
        image_id=course.get("imageId"),
        metadata={
            "level": course["level"],
            "students": f"{course['students']:,}",
            "rating": course["rating"],
        },
    )


def article_mapper(post: dict) -> dict:
    return {
        "id": post["id"],
        "title": post["title"],
        "subtitle": f"By {post['author']}",
        "description": post["excerpt"],
        "image_id": post.get("imageId"),
        "metadata": {"date": post["date"], "readTime": post["readTime"]},
    }


def member_mapper(user: dict) -> DisplayItem:
    return DisplayItem(
        id=user["id"],
        title=user["displayName"],
        subtitle=f"@{user['username']}",
        image_id=user.get("avatar"),
        metadata={"role": user["role"], "isOnline": user["isOnline"]},
    )

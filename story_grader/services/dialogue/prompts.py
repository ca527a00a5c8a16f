# story_grader/services/dialogue/prompts.py
"""
Prompt templates sent to the completion provider.

Every builder here is a pure function of its request: the same request
always produces the same prompt string.
"""
import re

from story_grader.schema.grading import (
    Difficulty,
    FeedbackRequest,
    GradingRequest,
)
from story_grader.schema.questions import QuestionGenerationRequest

UNANSWERED_PLACEHOLDER = "لم يجب الطالب"
FEEDBACK_UNANSWERED_PLACEHOLDER = "لم يجب"
UNGRADED_PLACEHOLDER = "لم تحدد بعد"

NONSENSE_NOTE = "⚠️ ملاحظة: هذه إجابة عشوائية/غير مكتملة"

QUESTION_COUNTS = {
    Difficulty.EASY: 3,
    Difficulty.MEDIUM: 4,
    Difficulty.HARD: 5,
}

_REPEATED_CHAR = re.compile(r"^(\S)\1{3,}$")
_LATIN_ONLY = re.compile(r"^[a-zA-Z\s]+$")
_ARABIC_CHAR = re.compile(r"[\u0600-\u06FF]")

GRADING_RUBRIC = """
ملاحظة مهمة: هذه إجابات طفل صغير (صف {grade_level}) يتعلم اللغة العربية، كن منصفاً ومشجعاً ومتساهلاً في التقييم.

**معايير التقييم (الدرجة دائماً بين 50 و 100):**
- إجابة صحيحة كاملة = 90-100
- إجابة صحيحة بسيطة/قصيرة = 80-95
- محاولة جيدة مع بعض الأخطاء = 70-85
- إجابة قصيرة جداً أو مبسطة لكن فيها محاولة = 60-80
- إجابة ضعيفة أو عشوائية أو غير مكتملة = 50-60

**قواعد:**
1. لا تعطِ درجة أقل من 50 أبداً، فالهدف هو تشجيع الطفل على القراءة
2. كافئ المحاولة والفهم العام أكثر من دقة الإملاء والقواعد
3. اكتب التعليق بلغة بسيطة ولطيفة تناسب طفلاً صغيراً

يجب أن يتكون ردك من سطرين فقط بالتنسيق التالي بدون أي نص إضافي:
GRADE: [رقم من 50 إلى 100]
FEEDBACK: [تعليق قصير بالعربية يوضح نقاط القوة وما يمكن تحسينه]

مثال:
GRADE: 85
FEEDBACK: ممتاز! لقد أظهرت فهماً جيداً للقصة. استمر في هذا الجهد! 🌟
"""


def is_nonsense_answer(answer: str) -> bool:
    """Heuristic for random or unfinished answers (e.g. "HHHH", "abc")."""
    if not answer or len(answer.strip()) < 2:
        return True

    trimmed = answer.strip()

    if _REPEATED_CHAR.match(trimmed):
        return True

    if _LATIN_ONLY.match(trimmed) and len(trimmed) <= 5:
        return True

    if len(trimmed) < 3 and not _ARABIC_CHAR.search(trimmed):
        return True

    return False


def build_grading_prompt(request: GradingRequest) -> str:
    prompt = f"""أنت معلم تقوم بتقييم إجابات طالب في الصف {request.grade_level}.
القصة التي قرأها الطالب بعنوان: "{request.story_title}"

محتوى القصة:
{request.story_content}

صعوبة القصة: {request.difficulty.value} ({request.difficulty.arabic})

الأسئلة وإجابات الطالب:

"""

    has_nonsense_answers = False
    for question in request.questions:
        answer = request.answers.get(question.id) or UNANSWERED_PLACEHOLDER
        is_nonsense = is_nonsense_answer(answer)
        has_nonsense_answers = has_nonsense_answers or is_nonsense

        prompt += f"""السؤال: {question.text_arabic}
نوع السؤال: {question.type.value}
الجواب: {answer}
{NONSENSE_NOTE if is_nonsense else ''}

"""

    if has_nonsense_answers:
        prompt += (
            "\n⚠️ تنبيه: بعض الإجابات عشوائية أو غير مكتملة، "
            "ضع الدرجة في الحد الأدنى من المعايير لهذه الإجابات.\n"
        )

    prompt += GRADING_RUBRIC.format(grade_level=request.grade_level)
    return prompt


def build_feedback_prompt(request: FeedbackRequest) -> str:
    grade = (
        f"{request.grade}/100"
        if request.grade is not None
        else UNGRADED_PLACEHOLDER
    )

    questions = "\n".join(
        f"""
السؤال {i + 1}: {question.text_arabic}
الإجابة: {request.answers.get(question.id) or FEEDBACK_UNANSWERED_PLACEHOLDER}
"""
        for i, question in enumerate(request.questions)
    )

    return f"""أنت معلم لغة عربية تكتب تعليقاً تشجيعياً لطالب.

اسم الطالب: {request.student_name}
القصة: {request.story_title}
الدرجة: {grade}

الأسئلة وإجابات الطالب:
{questions}

اكتب تعليقاً قصيراً (2-3 جمل) بالعربية يكون:
- مشجعاً وإيجابياً
- يذكر نقاط القوة في إجابات الطالب
- يقدم نصيحة بسيطة للتحسين إن وجدت
- مناسباً لطفل صغير

اكتب التعليق مباشرة بدون مقدمة:"""


def build_questions_prompt(request: QuestionGenerationRequest) -> str:
    difficulty = request.difficulty
    grade_level = request.grade_level
    count = QUESTION_COUNTS[difficulty]

    extra_types = ""
    if difficulty != Difficulty.EASY:
        extra_types += "4. سؤال التحليل البسيط (ما هي الفكرة الرئيسية؟)\n"
    if difficulty == Difficulty.HARD:
        extra_types += "5. سؤال التفكير النقدي (كيف يمكن تطبيق درس القصة في الحياة؟)\n"

    return f"""
أنت معلم خبير في الصف {grade_level} الابتدائي.
المهمة: إنشاء نموذج أسئلة مناسبة للأطفال في الصف {grade_level} باللغة العربية.

القصة:
العنوان: {request.story_title}
المحتوى: {request.story_content}
مستوى الصعوبة: {difficulty.value}

يرجى إنشاء {count} أسئلة تتناسب مع مستوى الصف {grade_level} ومستوى الصعوبة {difficulty.value}.

أنواع الأسئلة المطلوبة:
1. سؤال فهم مباشر (ما هو اسم البطل؟ / ماذا حدث في القصة؟)
2. سؤال التفكير البسيط (لماذا فعل البطل هذا؟ / ما هي الرسالة من القصة؟)
3. سؤال مفتوح بسيط (ماذا كان شعورك عند قراءة القصة؟ / هل تحب نهاية القصة؟)
{extra_types}
يجب أن تكون الأسئلة:
- بسيطة ومناسبة لطلاب الصف {grade_level}
- واضحة ومفهومة
- مرتبطة بمحتوى القصة
- مشجعة ومحفزة للتفكير

يرجى إرجاع الأسئلة بالتنسيق التالي (لكل سؤال):
ID: [معرف فريد]
TEXT: [نص السؤال بالعربية]
TYPE: [multiple_choice / short_answer / long_answer]
REQUIRED: true

إذا كان السؤال multiple_choice، أضف:
OPTIONS: [خيار1، خيار2، خيار3، خيار4]

مثال:
ID: q1
TEXT: ما هو اسم البطل في القصة؟
TYPE: short_answer
REQUIRED: true

ID: q2
TEXT: ما هي الفكرة الرئيسية من القصة؟
TYPE: long_answer
REQUIRED: true

يرجى إرجاع الأسئلة فقط بدون أي تعليقات إضافية.
"""

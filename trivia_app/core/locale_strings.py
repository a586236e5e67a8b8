"""Per-locale UI text for every page of the quiz.

Each supported locale shares one set of pages; only the strings below differ.
Locales without their own entry fall back to English.
"""

from __future__ import annotations

from dataclasses import dataclass

from trivia_app.constants.locale_constants import DEFAULT_LANGUAGE, SUPPORTED_LANGUAGES
from trivia_app.core.models import DifficultyTier, ResultTier


@dataclass(frozen=True, slots=True)
class DifficultyText:
    name: str
    description: str


@dataclass(frozen=True, slots=True)
class LocaleStrings:
    """Text shown on the home, difficulty, quiz and result pages."""

    site_title: str
    change_language: str
    start_here: str
    tagline: str
    start_quiz: str
    select_difficulty: str
    start_tier_quiz: str  # "{name}"
    back_to_home: str
    difficulties: dict[DifficultyTier, DifficultyText]
    loading: str
    question_progress: str  # "{number}", "{total}"
    score_label: str  # "{score}", "{total}"
    check_answer: str
    next_question: str
    finish_quiz: str
    quit_quiz: str
    explanation_heading: str
    correct_feedback: str
    incorrect_feedback: str  # "{answer}"
    answer_breakdown: str
    no_questions: str
    results_heading: str
    your_score: str  # "{score}", "{total}"
    share: str
    share_text: str  # "{score}", "{total}"
    share_unsupported: str
    retake_quiz: str
    choose_another_difficulty: str
    favorite_spots: str
    no_recommendations: str
    result_titles: dict[ResultTier, str]
    result_bodies: dict[ResultTier, str]


_ENGLISH = LocaleStrings(
    site_title="Japan Trivia Quiz",
    change_language="Change Language",
    start_here="Start here",
    tagline=(
        "Make your Japan trip 7 times more enjoyable! Learn fascinating trivia shared "
        "by locals that you can confirm while sightseeing!"
    ),
    start_quiz="Start Quiz",
    select_difficulty="Select Difficulty",
    start_tier_quiz="Start {name} Quiz",
    back_to_home="Back to Home",
    difficulties={
        DifficultyTier.BEGINNER: DifficultyText("Beginner", "Start here if it's your first trip to Japan!"),
        DifficultyTier.INTERMEDIATE: DifficultyText(
            "Intermediate", "If you're a repeat visitor or a Japan enthusiast, you should know this!"
        ),
        DifficultyTier.ADVANCED: DifficultyText(
            "Advanced", "If you can answer these, you've got deep knowledge of Japan!"
        ),
        DifficultyTier.JAPANESE: DifficultyText("Japanese", "This is a level even Japanese people will respect!"),
    },
    loading="Loading questions...",
    question_progress="Question {number} of {total}",
    score_label="Score: {score}/{total}",
    check_answer="Check Answer",
    next_question="Next Question",
    finish_quiz="Finish Quiz",
    quit_quiz="Quit Quiz",
    explanation_heading="Explanation",
    correct_feedback="Correct!",
    incorrect_feedback="Incorrect. The correct answer is {answer}.",
    answer_breakdown="Answer Breakdown:",
    no_questions="No questions are available for this selection yet.",
    results_heading="Quiz Results",
    your_score="Your Score: {score} out of {total}",
    share="Share",
    share_text="I just scored {score}/{total} on the Japan Trivia Quiz! Test your knowledge at the quiz home page:",
    share_unsupported="Sharing is not supported on this browser.",
    retake_quiz="Retake Quiz",
    choose_another_difficulty="Choose Another Difficulty",
    favorite_spots="Quiz Creator's Favorite Spots",
    no_recommendations="No recommendations available right now.",
    result_titles={
        ResultTier.CONGRATS: "Congrats!",
        ResultTier.CLOSE: "So close!",
        ResultTier.ENCOURAGEMENT: "No worries!",
    },
    result_bodies={
        ResultTier.CONGRATS: "You're ready to enjoy Japan like a local!",
        ResultTier.CLOSE: "Just a little more to become a Japan master!",
        ResultTier.ENCOURAGEMENT: "Your next challenge will make you a Japan expert!",
    },
)

_JAPANESE = LocaleStrings(
    site_title="日本豆知識クイズ",
    change_language="言語を変更",
    start_here="ここから始めよう",
    tagline="日本旅行が7倍楽しくなる！地元の人が教える豆知識を学んで、観光中に確かめてみよう！",
    start_quiz="クイズを始める",
    select_difficulty="難易度を選んでください",
    start_tier_quiz="{name}クイズを始める",
    back_to_home="ホームに戻る",
    difficulties={
        DifficultyTier.BEGINNER: DifficultyText("初級", "初めての日本旅行なら、ここから始めてみよう！"),
        DifficultyTier.INTERMEDIATE: DifficultyText("中級", "日本好きなリピーターなら、これくらいは知っていてほしい！"),
        DifficultyTier.ADVANCED: DifficultyText("上級", "これに答えられたら、かなりの日本通です！"),
        DifficultyTier.JAPANESE: DifficultyText("日本人級", "日本人でも尊敬されるレベルです！"),
    },
    loading="読み込み中...",
    question_progress="質問 {number} / {total}",
    score_label="スコア: {score}/{total}",
    check_answer="回答を確認",
    next_question="次の質問",
    finish_quiz="クイズを終了",
    quit_quiz="クイズをやめる",
    explanation_heading="解説",
    correct_feedback="正解！",
    incorrect_feedback="不正解。正解は {answer} です。",
    answer_breakdown="回答の詳細:",
    no_questions="この組み合わせのクイズはまだありません。",
    results_heading="クイズ結果",
    your_score="あなたのスコア: {total}問中 {score}問正解",
    share="シェア",
    share_text="私は日本クイズで {score}/{total} 点を取りました！ あなたも挑戦してみてください！",
    share_unsupported="このブラウザではシェア機能がサポートされていません。",
    retake_quiz="もう一度挑戦",
    choose_another_difficulty="他の難易度を選ぶ",
    favorite_spots="クイズクリエイターのお気に入りスポット",
    no_recommendations="現在おすすめはありません。",
    result_titles={
        ResultTier.CONGRATS: "おめでとう！",
        ResultTier.CLOSE: "もう少し！",
        ResultTier.ENCOURAGEMENT: "心配しないで！",
    },
    result_bodies={
        ResultTier.CONGRATS: "日本を地元のように楽しむ準備ができています！",
        ResultTier.CLOSE: "あと少しで日本の達人になれます！",
        ResultTier.ENCOURAGEMENT: "次のチャレンジで日本の専門家になれます！",
    },
)

_KOREAN = LocaleStrings(
    site_title="일본 상식 퀴즈",
    change_language="언어 변경",
    start_here="여기서 시작하세요",
    tagline="일본인에게는 상식으로 여겨지는 흥미로운 퀴즈를 배우고, 여행 중 답을 확인해보세요!",
    start_quiz="퀴즈 시작",
    select_difficulty="난이도를 선택하세요",
    start_tier_quiz="{name} 퀴즈 시작",
    back_to_home="홈으로 돌아가기",
    difficulties={
        DifficultyTier.BEGINNER: DifficultyText("초급", "일본 여행이 처음이라면, 여기서 시작해보세요!"),
        DifficultyTier.INTERMEDIATE: DifficultyText("중급", "일본을 좋아하는 리피터라면, 이 정도는 알고 있어야 해요!"),
        DifficultyTier.ADVANCED: DifficultyText("상급", "이 문제를 맞추면, 당신은 진정한 일본 전문가입니다!"),
        DifficultyTier.JAPANESE: DifficultyText("일본인 수준", "일본인도 존경할 만한 수준입니다!"),
    },
    loading="로딩 중...",
    question_progress="질문 {number} / {total}",
    score_label="점수: {score}/{total}",
    check_answer="정답 확인",
    next_question="다음 질문",
    finish_quiz="퀴즈 완료",
    quit_quiz="퀴즈 종료",
    explanation_heading="해설",
    correct_feedback="정답입니다!",
    incorrect_feedback="틀렸습니다. 정답은 {answer} 입니다.",
    answer_breakdown="답변 분석:",
    no_questions="이 선택에 해당하는 문제가 아직 없습니다.",
    results_heading="퀴즈 결과",
    your_score="당신의 점수: {total}점 중 {score}점",
    share="공유",
    share_text="저는 일본 퀴즈에서 {score}/{total} 점을 받았습니다! 당신도 도전해보세요!",
    share_unsupported="이 브라우저에서는 공유 기능을 지원하지 않습니다.",
    retake_quiz="다시 도전",
    choose_another_difficulty="다른 난이도 선택",
    favorite_spots="퀴즈 제작자의 추천 장소",
    no_recommendations="현재 추천 장소가 없습니다.",
    result_titles={
        ResultTier.CONGRATS: "축하합니다!",
        ResultTier.CLOSE: "아깝네요!",
        ResultTier.ENCOURAGEMENT: "걱정하지 마세요!",
    },
    result_bodies={
        ResultTier.CONGRATS: "당신은 이제 현지인처럼 일본을 즐길 준비가 되었습니다!",
        ResultTier.CLOSE: "조금만 더 노력하면 일본 마스터가 될 수 있어요!",
        ResultTier.ENCOURAGEMENT: "다음 도전에서 일본 전문가가 될 수 있습니다!",
    },
)

_THAI = LocaleStrings(
    site_title="แบบทดสอบความรู้ทั่วไปเกี่ยวกับญี่ปุ่น",
    change_language="เปลี่ยนภาษา",
    start_here="เริ่มที่นี่",
    tagline="เรียนรู้เกร็ดความรู้ที่น่าสนใจที่ถือว่าเป็นเรื่องปกติสำหรับคนญี่ปุ่น แล้วลองทดสอบระหว่างการท่องเที่ยว!",
    start_quiz="เริ่มแบบทดสอบ",
    select_difficulty="เลือกระดับความยาก",
    start_tier_quiz="เริ่มแบบทดสอบ{name}",
    back_to_home="กลับไปที่หน้าแรก",
    difficulties={
        DifficultyTier.BEGINNER: DifficultyText("ระดับเริ่มต้น", "หากนี่เป็นครั้งแรกที่คุณมาเที่ยวญี่ปุ่น เริ่มที่นี่!"),
        DifficultyTier.INTERMEDIATE: DifficultyText(
            "ระดับกลาง", "หากคุณเป็นผู้มาเยือนซ้ำหรือเป็นผู้หลงใหลในญี่ปุ่น คุณควรรู้สิ่งนี้!"
        ),
        DifficultyTier.ADVANCED: DifficultyText(
            "ระดับสูง", "หากคุณตอบคำถามเหล่านี้ได้ แสดงว่าคุณมีความรู้เกี่ยวกับญี่ปุ่นลึกซึ้ง!"
        ),
        DifficultyTier.JAPANESE: DifficultyText("ระดับผู้เชี่ยวชาญ", "ระดับนี้แม้แต่คนญี่ปุ่นยังต้องยอมรับ!"),
    },
    loading="กำลังโหลด...",
    question_progress="คำถาม {number} จาก {total}",
    score_label="คะแนน: {score}/{total}",
    check_answer="ตรวจคำตอบ",
    next_question="คำถามถัดไป",
    finish_quiz="จบแบบทดสอบ",
    quit_quiz="ออกจากแบบทดสอบ",
    explanation_heading="คำอธิบาย",
    correct_feedback="ถูกต้อง!",
    incorrect_feedback="ไม่ถูกต้อง คำตอบที่ถูกคือ {answer}.",
    answer_breakdown="การแยกคำตอบ:",
    no_questions="ยังไม่มีคำถามสำหรับตัวเลือกนี้",
    results_heading="ผลลัพธ์ของแบบทดสอบ",
    your_score="คะแนนของคุณ: {score} จาก {total}",
    share="แชร์",
    share_text="ฉันทำคะแนนได้ {score}/{total} ในแบบทดสอบญี่ปุ่น! ลองท้าทายความรู้ของคุณดูสิ!",
    share_unsupported="เบราว์เซอร์นี้ไม่รองรับการแชร์",
    retake_quiz="ทำแบบทดสอบอีกครั้ง",
    choose_another_difficulty="เลือกความยากระดับอื่น",
    favorite_spots="สถานที่โปรดของผู้สร้างแบบทดสอบ",
    no_recommendations="ยังไม่มีคำแนะนำในขณะนี้",
    result_titles={
        ResultTier.CONGRATS: "ขอแสดงความยินดี!",
        ResultTier.CLOSE: "เกือบแล้ว!",
        ResultTier.ENCOURAGEMENT: "ไม่ต้องกังวล!",
    },
    result_bodies={
        ResultTier.CONGRATS: "คุณพร้อมที่จะเพลิดเพลินกับญี่ปุ่นในฐานะคนท้องถิ่นแล้ว!",
        ResultTier.CLOSE: "อีกนิดเดียวคุณจะเป็นปรมาจารย์เรื่องญี่ปุ่น!",
        ResultTier.ENCOURAGEMENT: "ท้าทายครั้งหน้าจะทำให้คุณเป็นผู้เชี่ยวชาญเรื่องญี่ปุ่น!",
    },
)

_SIMPLIFIED_CHINESE = LocaleStrings(
    site_title="日本知识问答",
    change_language="更改语言",
    start_here="从这里开始",
    tagline="学习对日本人来说常识的小知识，并在旅游中验证你的答案吧！",
    start_quiz="开始测验",
    select_difficulty="选择难度",
    start_tier_quiz="开始{name}测验",
    back_to_home="返回首页",
    difficulties={
        DifficultyTier.BEGINNER: DifficultyText("初级", "如果这是你第一次来日本，建议从这里开始！"),
        DifficultyTier.INTERMEDIATE: DifficultyText("中级", "如果你是回头客或者日本爱好者，这些你应该知道！"),
        DifficultyTier.ADVANCED: DifficultyText("高级", "如果你能回答这些问题，说明你对日本有深入的了解！"),
        DifficultyTier.JAPANESE: DifficultyText("专家级", "这个难度就连日本人也会佩服你！"),
    },
    loading="加载中...",
    question_progress="问题 {number} / {total}",
    score_label="分数: {score}/{total}",
    check_answer="检查答案",
    next_question="下一个问题",
    finish_quiz="结束测验",
    quit_quiz="退出测验",
    explanation_heading="解释",
    correct_feedback="正确!",
    incorrect_feedback="错误，正确答案是 {answer}.",
    answer_breakdown="答案分解:",
    no_questions="该选项暂时没有题目。",
    results_heading="测验结果",
    your_score="你的得分: {score} / {total}",
    share="分享",
    share_text="我在日本知识问答中得到了 {score}/{total} 的分数！快来挑战你的知识吧！",
    share_unsupported="此浏览器不支持分享。",
    retake_quiz="重新测验",
    choose_another_difficulty="选择其他难度",
    favorite_spots="测验创作者的最爱地点",
    no_recommendations="暂无推荐。",
    result_titles={
        ResultTier.CONGRATS: "恭喜!",
        ResultTier.CLOSE: "差一点就成功了!",
        ResultTier.ENCOURAGEMENT: "不用担心!",
    },
    result_bodies={
        ResultTier.CONGRATS: "你已经准备好像当地人一样享受日本了！",
        ResultTier.CLOSE: "再多学习一点，你就能成为日本专家了！",
        ResultTier.ENCOURAGEMENT: "下次挑战会让你成为日本专家！",
    },
)

_TRADITIONAL_CHINESE = LocaleStrings(
    site_title="日本知識問答",
    change_language="更改語言",
    start_here="從這裡開始",
    tagline="學習對日本人來說是常識的有趣小知識，並在旅遊中驗證你的答案吧！",
    start_quiz="開始測驗",
    select_difficulty="選擇難度",
    start_tier_quiz="開始{name}測驗",
    back_to_home="返回首頁",
    difficulties={
        DifficultyTier.BEGINNER: DifficultyText("初級", "如果這是你第一次來日本，從這裡開始吧！"),
        DifficultyTier.INTERMEDIATE: DifficultyText("中級", "如果你是回頭客或是日本愛好者，這些你應該知道！"),
        DifficultyTier.ADVANCED: DifficultyText("高級", "能回答這些問題，代表你對日本有很深的了解！"),
        DifficultyTier.JAPANESE: DifficultyText("專家級", "這個難度即使日本人也會尊敬你！"),
    },
    loading="載入中...",
    question_progress="問題 {number} / {total}",
    score_label="分數: {score}/{total}",
    check_answer="檢查答案",
    next_question="下一個問題",
    finish_quiz="結束測驗",
    quit_quiz="退出測驗",
    explanation_heading="解釋",
    correct_feedback="正確!",
    incorrect_feedback="錯誤，正確答案是 {answer}.",
    answer_breakdown="答案解析:",
    no_questions="此選項暫時沒有題目。",
    results_heading="測驗結果",
    your_score="你的得分: {score} / {total}",
    share="分享",
    share_text="我在日本知識問答中得到了 {score}/{total} 的分數！快來挑戰你的知識吧！",
    share_unsupported="此瀏覽器不支援分享。",
    retake_quiz="重新測驗",
    choose_another_difficulty="選擇其他難度",
    favorite_spots="測驗創作者的最愛地點",
    no_recommendations="暫無推薦。",
    result_titles={
        ResultTier.CONGRATS: "恭喜!",
        ResultTier.CLOSE: "差一點就成功了!",
        ResultTier.ENCOURAGEMENT: "不用擔心!",
    },
    result_bodies={
        ResultTier.CONGRATS: "你已經準備好像當地人一樣享受日本了！",
        ResultTier.CLOSE: "再多學習一點，你就能成為日本專家了！",
        ResultTier.ENCOURAGEMENT: "下次挑戰會讓你成為日本專家！",
    },
)

_STRINGS: dict[str, LocaleStrings] = {
    "en": _ENGLISH,
    "ja": _JAPANESE,
    "ko": _KOREAN,
    "th": _THAI,
    "zh-Hans": _SIMPLIFIED_CHINESE,
    "zh-Hant": _TRADITIONAL_CHINESE,
}


def is_supported_language(language: str | None) -> bool:
    return language in SUPPORTED_LANGUAGES


def resolve_language(language: str | None) -> str:
    """Return ``language`` when supported, otherwise the default locale."""
    if is_supported_language(language):
        return language  # type: ignore[return-value]
    return DEFAULT_LANGUAGE


def get_strings(language: str | None) -> LocaleStrings:
    return _STRINGS.get(resolve_language(language), _STRINGS[DEFAULT_LANGUAGE])

"""Edu-Ardu lesson content: welcome messages and step graphs for every lesson type."""

from __future__ import annotations

from robotutor.content.tree import (
    COMPLETED_STEP,
    Choice,
    ContentTree,
    DialogueNode,
    EducationalContent,
    Lesson,
    LessonType,
)

# Shared wrap-up step; each lesson reaches it through its quiz or final topic.
_WRAP_UP_OPTIONS = (
    Choice("see_progress", "Show my progress 🏅", "primary"),
    Choice("new_lesson", "What else can I learn?", "secondary"),
)

_COMPLETED_NODES = {
    "see_progress": DialogueNode(
        text="🏅 You did it! Check your badges and steps, you earned every one of them. Want to keep going?",
        options=_WRAP_UP_OPTIONS,
    ),
    "new_lesson": DialogueNode(
        text=(
            "🚀 There is always more to discover: Computational Thinking, Robotics Basics and Arduino "
            "are waiting for you. End this chat and pick your next lesson!"
        ),
        options=_WRAP_UP_OPTIONS,
    ),
}

_CT_POWERS = (
    Choice("decomposition", "Decomposition 🧩", "primary"),
    Choice("patterns", "Patterns 🔄", "primary"),
    Choice("abstraction", "Abstraction ⭐", "primary"),
    Choice("algorithms", "Algorithms 📋", "primary"),
)

_LEARNING_STYLES = (
    Choice("visual_learner", "Show me pictures 🎨", "primary"),
    Choice("hands_on_learner", "Let me try it 🛠️", "primary"),
    Choice("story_learner", "Tell me a story 📖", "primary"),
)


def _deep_dive(text: str, topic: str) -> DialogueNode:
    return DialogueNode(
        text=text,
        options=_WRAP_UP_OPTIONS,
        next_step=COMPLETED_STEP,
        educational_content=EducationalContent(topic=topic, level="introduction"),
    )


def _style_reply(text: str) -> DialogueNode:
    return DialogueNode(
        text=text,
        options=(
            Choice("yes_powers", "Show me the powers! ⚡", "primary"),
            Choice("give_example", "Give me an example first", "secondary"),
        ),
        next_step="lesson_computational_thinking",
    )


INTRODUCTION = Lesson(
    lesson_type=LessonType.INTRODUCTION,
    welcome=DialogueNode(
        text=(
            "🤖 Hi! I'm Edu-Ardu, your personal educational robotics assistant! I'm here to guide you "
            "on an amazing journey through the world of robots. Shall we start our adventure?"
        ),
        options=(
            Choice("lets_start", "Let's start! 🚀", "primary"),
            Choice("what_learn", "What will I learn?", "secondary"),
            Choice("already_know", "I already know a bit", "secondary"),
        ),
    ),
    first_step="topic_selection",
    steps={
        "topic_selection": {
            "lets_start": DialogueNode(
                text="What energy! I love it! 🎉 Now tell me: what makes you most curious about robotics?",
                options=(
                    Choice("how_robots_think", 'How do robots "think"? 🧠', "primary"),
                    Choice("how_robots_move", "How do robots move? 🤖", "primary"),
                    Choice("programming_robots", "How do I program them? 💻", "primary"),
                    Choice("build_robots", "How do I build one? 🔧", "primary"),
                ),
                next_step="knowledge_check",
            ),
            "what_learn": DialogueNode(
                text=(
                    "Great question! 📚 I'll teach you Computational Thinking, Robotics Basics and Arduino. "
                    "You'll learn to think like a programmer, understand how robots work and build your "
                    "own projects! Ready?"
                ),
                options=(
                    Choice("sounds_great", "Sounds amazing! 😍", "primary"),
                    Choice("sounds_hard", "Sounds hard... 😰", "secondary"),
                    Choice("lets_start", "Let's start!", "primary"),
                ),
                next_step="topic_selection",
            ),
            "sounds_great": DialogueNode(
                text="Awesome! 🌟 Pick what you want to discover first:",
                options=(
                    Choice("how_robots_think", 'How do robots "think"? 🧠', "primary"),
                    Choice("how_robots_move", "How do robots move? 🤖", "primary"),
                    Choice("programming_robots", "How do I program them? 💻", "primary"),
                    Choice("build_robots", "How do I build one? 🔧", "primary"),
                ),
                next_step="knowledge_check",
            ),
            "sounds_hard": DialogueNode(
                text=(
                    "Don't worry! 💪 We'll go one small step at a time, and I'll be right here with you. "
                    "Every robot builder started exactly where you are now."
                ),
                options=(
                    Choice("lets_start", "Okay, let's try! 🚀", "primary"),
                    Choice("what_learn", "Tell me again what I'll learn", "secondary"),
                ),
                hint="You can always ask for an example when something feels tricky.",
            ),
            "already_know": DialogueNode(
                text="How cool! It's always great to meet someone with experience! 🌟 What is your robotics level?",
                options=(
                    Choice("some_knowledge", "Basic concepts", "secondary"),
                    Choice("built_projects", "I've built some projects", "secondary"),
                    Choice("experienced", "Lots of experience", "secondary"),
                ),
                next_step="knowledge_check",
            ),
        },
        "knowledge_check": {
            "how_robots_think": DialogueNode(
                text=(
                    "Excellent choice! 🧠 Robots 'think' using COMPUTATIONAL THINKING, a special way of "
                    "solving problems. It's like having a mental superpower! Want to discover its 4 secret powers?"
                ),
                options=(
                    Choice("yes_powers", "Yes! What are they? ⚡", "primary"),
                    Choice("give_example", "Give me an example first", "secondary"),
                ),
                next_step="lesson_computational_thinking",
                educational_content=EducationalContent(topic="computational_thinking", level="introduction"),
            ),
            "how_robots_move": DialogueNode(
                text=(
                    "Robots move with ACTUATORS: motors that spin wheels, turn arms and wave grippers! ⚙️ "
                    "Before we go on, how do you like to learn best?"
                ),
                options=_LEARNING_STYLES,
                next_step="learning_style",
                educational_content=EducationalContent(topic="robotics_basic", level="introduction"),
            ),
            "programming_robots": DialogueNode(
                text=(
                    "Programming is how we give robots instructions, step by step! 💻 "
                    "First, tell me how you like to learn best:"
                ),
                options=_LEARNING_STYLES,
                next_step="learning_style",
                educational_content=EducationalContent(topic="arduino_intro", level="introduction"),
            ),
            "build_robots": DialogueNode(
                text=(
                    "Building robots means joining a body, sensors, motors and a tiny computer brain! 🔧 "
                    "How do you like to learn best?"
                ),
                options=_LEARNING_STYLES,
                next_step="learning_style",
                educational_content=EducationalContent(topic="robotics_basic", level="introduction"),
            ),
            "some_knowledge": DialogueNode(
                text=(
                    "Perfect! With that base we can speed up a little! 🏃 How about going straight to "
                    "something more practical? What interests you most right now?"
                ),
                options=(
                    Choice("arduino_hands_on", "Arduino in practice! 🛠️", "primary"),
                    Choice("advanced_robotics", "Advanced robotics 🤖", "primary"),
                    Choice("review_basics", "Review the basics", "secondary"),
                ),
                next_step="advanced_topics",
            ),
            "built_projects": DialogueNode(
                text="A real maker! 🛠️ Let's pick something that builds on your projects:",
                options=(
                    Choice("arduino_hands_on", "Arduino in practice! 🛠️", "primary"),
                    Choice("advanced_robotics", "Advanced robotics 🤖", "primary"),
                    Choice("review_basics", "Review the basics", "secondary"),
                ),
                next_step="advanced_topics",
            ),
            "experienced": DialogueNode(
                text="Wow, an expert in the house! 🏆 Where do you want to go next?",
                options=(
                    Choice("arduino_hands_on", "Arduino in practice! 🛠️", "primary"),
                    Choice("advanced_robotics", "Advanced robotics 🤖", "primary"),
                    Choice("review_basics", "Review the basics", "secondary"),
                ),
                next_step="advanced_topics",
            ),
        },
        "learning_style": {
            "visual_learner": _style_reply(
                "🎨 Great, I'll draw things out for you! Robots 'think' with 4 secret powers. Ready to see them?"
            ),
            "hands_on_learner": _style_reply(
                "🛠️ A builder at heart! We'll try things as we go. Robots 'think' with 4 secret powers. Ready?"
            ),
            "story_learner": _style_reply(
                "📖 I love stories! Once upon a time, a robot learned 4 secret powers to solve any problem..."
            ),
        },
        "lesson_computational_thinking": {
            "yes_powers": DialogueNode(
                text=(
                    "🎉 The 4 superpowers are: DECOMPOSITION (breaking problems apart), PATTERNS (finding "
                    "repetitions), ABSTRACTION (focusing on what matters) and ALGORITHMS (writing recipes)! "
                    "Which one do you want to explore first?"
                ),
                options=_CT_POWERS,
                next_step="deep_dive_concept",
            ),
            "yes_all_powers": DialogueNode(
                text=(
                    "💪 Here they are: DECOMPOSITION, PATTERNS, ABSTRACTION and ALGORITHMS! "
                    "Pick one to explore:"
                ),
                options=_CT_POWERS,
                next_step="deep_dive_concept",
            ),
            "give_example": DialogueNode(
                text=(
                    "Sure! 💡 Imagine you want to make a sandwich. First we DECOMPOSE: get bread, choose a "
                    "filling, put it together. Then we write an ALGORITHM: 1. Open the bread 2. Add the "
                    "filling 3. Close it. Easy, right? Want to meet all the powers now?"
                ),
                options=(
                    Choice("yes_all_powers", "Yes! All the powers! 💪", "primary"),
                    Choice("more_examples", "More examples, please", "secondary"),
                ),
                next_step="lesson_computational_thinking",
            ),
            "more_examples": DialogueNode(
                text=(
                    "🧦 Getting dressed is an algorithm too: socks BEFORE shoes! And spotting that every "
                    "morning starts the same way? That's finding a PATTERN."
                ),
                options=(
                    Choice("yes_all_powers", "Now show me all the powers! 💪", "primary"),
                    Choice("more_examples", "One more example!", "secondary"),
                ),
                hint="Look for steps you always do in the same order.",
            ),
        },
        "deep_dive_concept": {
            "decomposition": _deep_dive(
                "🧩 DECOMPOSITION means breaking a big problem into small pieces. A robot cleaning a room "
                "splits it into: find the mess, pick it up, put it away!",
                "decomposition",
            ),
            "patterns": _deep_dive(
                "🔄 PATTERNS are things that repeat. A line-following robot notices: dark line, turn; "
                "light floor, go straight. Over and over!",
                "patterns",
            ),
            "abstraction": _deep_dive(
                "⭐ ABSTRACTION means ignoring what doesn't matter. A robot crossing a room cares about "
                "obstacles, not the colour of the walls!",
                "abstraction",
            ),
            "algorithms": _deep_dive(
                "📋 ALGORITHMS are step-by-step recipes. Every robot program is an algorithm: do this, "
                "then this, then that!",
                "algorithms",
            ),
        },
        "advanced_topics": {
            "arduino_hands_on": _deep_dive(
                "🛠️ Let's get practical! An Arduino reads sensors on its input pins and drives motors and "
                "LEDs on its output pins. Start the Arduino lesson to write your first program!",
                "arduino_intro",
            ),
            "advanced_robotics": _deep_dive(
                "🤖 Advanced robots combine many sensors to map a room, plan a path and avoid obstacles, "
                "all using the same four thinking powers!",
                "robotics_basic",
            ),
            "review_basics": DialogueNode(
                text="📚 Good plan! Strong basics make strong robots. Let's revisit the 4 thinking superpowers.",
                options=(
                    Choice("yes_powers", "Show me the powers! ⚡", "primary"),
                    Choice("give_example", "Give me an example first", "secondary"),
                ),
                next_step="lesson_computational_thinking",
            ),
        },
        COMPLETED_STEP: _COMPLETED_NODES,
    },
)


_CT_QUIZ_OPTIONS = (
    Choice("decomposition", "Decomposition 🧩", "primary"),
    Choice("patterns", "Patterns 🔄", "primary"),
    Choice("algorithms", "Algorithms 📋", "primary"),
)

COMPUTATIONAL_THINKING = Lesson(
    lesson_type=LessonType.COMPUTATIONAL_THINKING,
    welcome=DialogueNode(
        text=(
            "🧠 Welcome to Computational Thinking! I'm Edu-Ardu, and today you'll learn how robots "
            "(and programmers!) solve problems."
        ),
        options=(
            Choice("start_lesson", "Let's go! 🚀", "primary"),
            Choice("what_is_ct", "What is computational thinking?", "secondary"),
        ),
    ),
    first_step="ct_intro",
    steps={
        "ct_intro": {
            "start_lesson": DialogueNode(
                text=(
                    "⚡ Computational thinking has 4 powers: decomposition, patterns, abstraction and "
                    "algorithms. Want an example, or are you ready for a quiz?"
                ),
                options=(
                    Choice("show_example", "Show me an example 💡", "secondary"),
                    Choice("ready_quiz", "Quiz me! 📝", "primary"),
                ),
                next_step="ct_powers",
                educational_content=EducationalContent(topic="computational_thinking", level="basic"),
            ),
            "what_is_ct": DialogueNode(
                text=(
                    "💡 Computational thinking is a way to solve problems so that a computer (or a robot!) "
                    "could follow your solution."
                ),
                options=(Choice("start_lesson", "Cool, let's start! 🚀", "primary"),),
            ),
        },
        "ct_powers": {
            "show_example": DialogueNode(
                text=(
                    "🥪 Making a sandwich: split it into small jobs (decomposition), notice you spread "
                    "every slice the same way (patterns), and write the steps down (algorithm)!"
                ),
                options=(Choice("ready_quiz", "I'm ready for the quiz! 📝", "primary"),),
            ),
            "ready_quiz": DialogueNode(
                text="📝 Quiz time! Which power breaks a big problem into smaller parts?",
                options=_CT_QUIZ_OPTIONS,
                next_step="quiz_computational_thinking",
            ),
        },
        "quiz_computational_thinking": {
            "decomposition": DialogueNode(
                text="🎉 Correct! DECOMPOSITION breaks big problems into bite-sized pieces. You're a natural!",
                options=_WRAP_UP_OPTIONS,
                next_step=COMPLETED_STEP,
                educational_content=EducationalContent(topic="decomposition", level="basic"),
            ),
            "patterns": DialogueNode(
                text="Close! 🔄 Patterns help us spot repetitions. Which power breaks a problem into parts?",
                options=_CT_QUIZ_OPTIONS,
                hint="Think of cutting a pizza into slices.",
            ),
            "algorithms": DialogueNode(
                text="Nice try! 📋 Algorithms are step-by-step recipes. Which power breaks a problem into parts?",
                options=_CT_QUIZ_OPTIONS,
                hint="Think of cutting a pizza into slices.",
            ),
        },
        COMPLETED_STEP: _COMPLETED_NODES,
    },
)


_ROBOT_PARTS = (
    Choice("sensors", "Sensors 👀", "primary"),
    Choice("actuators", "Actuators ⚙️", "primary"),
    Choice("controller", "Controller 🧠", "primary"),
    Choice("ready_quiz", "Quiz me! 📝", "secondary"),
)

_ROBOTICS_QUIZ_OPTIONS = (
    Choice("sensors_and_actuators", "Sensors and actuators", "primary"),
    Choice("only_wheels", "Only wheels", "primary"),
    Choice("only_screen", "Only a screen", "primary"),
)

ROBOTICS_BASIC = Lesson(
    lesson_type=LessonType.ROBOTICS_BASIC,
    welcome=DialogueNode(
        text="🤖 Welcome to Robotics Basics! I'm Edu-Ardu. Let's find out what makes a robot a robot!",
        options=(
            Choice("start_lesson", "Let's go! 🚀", "primary"),
            Choice("what_is_robot", "What is a robot?", "secondary"),
        ),
    ),
    first_step="robot_parts",
    steps={
        "robot_parts": {
            "start_lesson": DialogueNode(
                text=(
                    "🔍 Every robot has three kinds of parts: SENSORS to feel the world, a CONTROLLER to "
                    "think, and ACTUATORS to move. Which one do you want to meet?"
                ),
                options=_ROBOT_PARTS,
                next_step="parts_detail",
                educational_content=EducationalContent(topic="robotics_basic", level="basic"),
            ),
            "what_is_robot": DialogueNode(
                text="🤖 A robot is a machine that can sense, think and act on its own, following a program!",
                options=(Choice("start_lesson", "Show me its parts! 🔍", "primary"),),
            ),
        },
        "parts_detail": {
            "sensors": DialogueNode(
                text="👀 SENSORS are the robot's eyes and ears: light, distance, touch and sound sensors!",
                options=_ROBOT_PARTS,
                educational_content=EducationalContent(topic="sensors", level="basic"),
            ),
            "actuators": DialogueNode(
                text="⚙️ ACTUATORS make things happen: motors, servos, buzzers and lights!",
                options=_ROBOT_PARTS,
                educational_content=EducationalContent(topic="actuators", level="basic"),
            ),
            "controller": DialogueNode(
                text="🧠 The CONTROLLER is the robot's brain. It reads the sensors and tells the actuators what to do.",
                options=_ROBOT_PARTS,
                educational_content=EducationalContent(topic="controller", level="basic"),
            ),
            "ready_quiz": DialogueNode(
                text="📝 Quiz time! What does a robot need to sense and act in the world?",
                options=_ROBOTICS_QUIZ_OPTIONS,
                next_step="quiz_robotics_basic",
            ),
        },
        "quiz_robotics_basic": {
            "sensors_and_actuators": DialogueNode(
                text="🎉 Exactly! Sensors let it feel the world and actuators let it act. You're a robot expert!",
                options=_WRAP_UP_OPTIONS,
                next_step=COMPLETED_STEP,
            ),
            "only_wheels": DialogueNode(
                text="Hmm 🛞 wheels help it move, but how would it know where to go? Try again!",
                options=_ROBOTICS_QUIZ_OPTIONS,
                hint="A robot has to feel AND move.",
            ),
            "only_screen": DialogueNode(
                text="Hmm 📺 a screen can show things, but it can't feel or move. Try again!",
                options=_ROBOTICS_QUIZ_OPTIONS,
                hint="A robot has to feel AND move.",
            ),
        },
        COMPLETED_STEP: _COMPLETED_NODES,
    },
)


_ARDUINO_QUIZ_OPTIONS = (
    Choice("programming_board", "A small programmable board", "primary"),
    Choice("video_game", "A video game", "primary"),
    Choice("battery", "A kind of battery", "primary"),
)

ARDUINO_INTRO = Lesson(
    lesson_type=LessonType.ARDUINO_INTRO,
    welcome=DialogueNode(
        text="🔌 Welcome to Arduino! I'm Edu-Ardu, and I'm named after this little board. Let's meet it!",
        options=(
            Choice("start_lesson", "Let's go! 🚀", "primary"),
            Choice("what_is_arduino", "What is an Arduino?", "secondary"),
        ),
    ),
    first_step="arduino_basics",
    steps={
        "arduino_basics": {
            "start_lesson": DialogueNode(
                text=(
                    "🛠️ An Arduino is a tiny computer on a board. We connect sensors and lights to its PINS "
                    "and tell it what to do with a program. What do you want to see?"
                ),
                options=(
                    Choice("pins", "What are pins? 📍", "secondary"),
                    Choice("blink_led", "Make an LED blink! 💡", "primary"),
                ),
                next_step="arduino_parts",
                educational_content=EducationalContent(topic="arduino_intro", level="basic"),
            ),
            "what_is_arduino": DialogueNode(
                text="🔌 Arduino is a small board you can program to read sensors and control lights and motors!",
                options=(Choice("start_lesson", "Show me more! 🚀", "primary"),),
            ),
        },
        "arduino_parts": {
            "pins": DialogueNode(
                text="📍 PINS are the little connectors on the board. INPUT pins read sensors, OUTPUT pins drive LEDs and motors.",
                options=(
                    Choice("blink_led", "Make an LED blink! 💡", "primary"),
                    Choice("ready_quiz", "Quiz me! 📝", "secondary"),
                ),
                educational_content=EducationalContent(topic="arduino_pins", level="basic"),
            ),
            "blink_led": DialogueNode(
                text=(
                    "💡 Every Arduino program has setup(), which runs once, and loop(), which repeats "
                    "forever. Turn the LED on, wait, turn it off, wait... and it blinks!"
                ),
                options=(
                    Choice("pins", "What are pins? 📍", "secondary"),
                    Choice("ready_quiz", "Quiz me! 📝", "primary"),
                ),
                educational_content=EducationalContent(topic="arduino_programming", level="basic"),
            ),
            "ready_quiz": DialogueNode(
                text="📝 Quiz time! What is an Arduino?",
                options=_ARDUINO_QUIZ_OPTIONS,
                next_step="quiz_arduino_intro",
            ),
        },
        "quiz_arduino_intro": {
            "programming_board": DialogueNode(
                text="🎉 Right! An Arduino is a small programmable board, the brain of many robots!",
                options=_WRAP_UP_OPTIONS,
                next_step=COMPLETED_STEP,
            ),
            "video_game": DialogueNode(
                text="😄 It can help you BUILD games, but it isn't one. Try again!",
                options=_ARDUINO_QUIZ_OPTIONS,
                hint="Remember the pins and the program.",
            ),
            "battery": DialogueNode(
                text="🔋 It needs power, but it isn't a battery. Try again!",
                options=_ARDUINO_QUIZ_OPTIONS,
                hint="Remember the pins and the program.",
            ),
        },
        COMPLETED_STEP: _COMPLETED_NODES,
    },
)


CONTENT_TREE = ContentTree(
    {
        LessonType.INTRODUCTION: INTRODUCTION,
        LessonType.COMPUTATIONAL_THINKING: COMPUTATIONAL_THINKING,
        LessonType.ROBOTICS_BASIC: ROBOTICS_BASIC,
        LessonType.ARDUINO_INTRO: ARDUINO_INTRO,
    }
)

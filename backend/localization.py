"""Language context shared by every screen.

The context is created once by the application and handed to each screen
instead of living in a module-level global.  Widgets bind to ``language`` to
refresh their texts when the user switches between Portuguese and English.
"""

from __future__ import annotations

from kivy.event import EventDispatcher
from kivy.properties import OptionProperty

from . import DEFAULT_LANGUAGE, LANGUAGES
from .catalog import localized

TRANSLATIONS: dict[str, dict[str, str]] = {
    "guideTitle": {"pt": "Guia do", "en": "Knee"},
    "guideSubtitle": {"pt": "Joelho", "en": "Guide"},
    "homeDesc": {
        "pt": "Exercícios seguros para fortalecer e proteger seus joelhos.",
        "en": "Safe exercises to strengthen and protect your knees.",
    },
    "startBtn": {"pt": "Começar", "en": "Start"},
    "resumeTitle": {"pt": "Treino em andamento", "en": "Workout in progress"},
    "resumeDesc": {
        "pt": "Você tem um treino não finalizado. Deseja continuar?",
        "en": "You have an unfinished workout. Do you want to continue?",
    },
    "yes": {"pt": "Sim", "en": "Yes"},
    "no": {"pt": "Não", "en": "No"},
    "forWhoTitle": {"pt": "Para quem é", "en": "Who is it for"},
    "forWhoDesc": {
        "pt": "Para quem sente dor ou desconforto no joelho ao treinar.",
        "en": "For anyone who feels knee pain or discomfort while training.",
    },
    "problemTitle": {"pt": "O problema", "en": "The problem"},
    "problemDesc": {
        "pt": "Parar de treinar enfraquece a musculatura que protege o joelho.",
        "en": "Stopping training weakens the muscles that protect the knee.",
    },
    "solutionTitle": {"pt": "A solução", "en": "The solution"},
    "solutionDesc": {
        "pt": "Exercícios adaptados, com carga e amplitude controladas.",
        "en": "Adapted exercises with controlled load and range of motion.",
    },
    "accessBtn": {"pt": "Acessar", "en": "Continue"},
    "principalHeader": {"pt": "Principal", "en": "Main"},
    "recWorkoutTitle": {"pt": "Treino recomendado", "en": "Recommended workout"},
    "recWorkoutSub": {"pt": "Programas prontos", "en": "Ready-made programs"},
    "adaptTitle": {"pt": "Adaptar meu treino", "en": "Adapt my workout"},
    "adaptSub": {"pt": "Escolha seus exercícios", "en": "Pick your exercises"},
    "recScreenTitle": {"pt": "Treinos", "en": "Workouts"},
    "sugTitle": {"pt": "Sugestões de treino", "en": "Suggested workouts"},
    "sugDesc": {
        "pt": "Escolha conforme sua frequência semanal.",
        "en": "Choose according to your weekly frequency.",
    },
    "workout2x": {"pt": "2x por semana", "en": "2x per week"},
    "workout3x": {"pt": "3x por semana", "en": "3x per week"},
    "important": {"pt": "Importante", "en": "Important"},
    "weightInstruction": {
        "pt": "Use uma carga com a qual você se sinta seguro.",
        "en": "Use a load you feel safe with.",
    },
    "exercisesLabel": {"pt": "exercícios", "en": "exercises"},
    "setsLabel": {"pt": "séries", "en": "sets"},
    "timerHint": {
        "pt": "Toque para iniciar/pausar • segure para zerar",
        "en": "Tap to start/pause • hold to reset",
    },
    "goodWorkout": {"pt": "BOM TREINO", "en": "HAVE A GOOD WORKOUT"},
    "quickFixLabel": {"pt": "Ajuste rápido", "en": "Quick fix"},
    "setsRecommended": {"pt": "Séries recomendadas", "en": "Recommended sets"},
    "tapToWatch": {"pt": "Toque para assistir", "en": "Tap to watch"},
    "videoPlaceholder": {"pt": "Vídeo em breve", "en": "Video coming soon"},
    "intervalValue": {"pt": "Intervalo: 60s", "en": "Rest: 60s"},
    "serie": {"pt": "Série", "en": "Set"},
    "repeticao": {"pt": "Repetições", "en": "Reps"},
    "carga": {"pt": "Carga", "en": "Load"},
    "finishWorkout": {"pt": "Finalizar treino", "en": "Finish workout"},
    "notFound": {"pt": "Treino não encontrado", "en": "Workout not found"},
    "understandTitle": {"pt": "Entenda", "en": "Understand"},
    "adaptCardTitle": {"pt": "Monte seu treino", "en": "Build your workout"},
    "adaptText1": {
        "pt": "Escolha quantos exercícios quer fazer hoje.",
        "en": "Choose how many exercises you want to do today.",
    },
    "adaptText2": {
        "pt": "Depois selecione exatamente essa quantidade na lista.",
        "en": "Then select exactly that many from the list.",
    },
    "proceed": {"pt": "Prosseguir", "en": "Proceed"},
    "setupTitle": {"pt": "Configurar", "en": "Setup"},
    "howMany": {"pt": "Quantos exercícios?", "en": "How many exercises?"},
    "chooseExercises": {"pt": "Escolher exercícios", "en": "Choose exercises"},
    "chooseTitle": {"pt": "Escolha", "en": "Choose"},
    "searchPlaceholder": {"pt": "Buscar exercício", "en": "Search exercise"},
    "startWorkout": {"pt": "Iniciar treino", "en": "Start workout"},
    "activeTitle": {"pt": "Treino ativo", "en": "Active workout"},
    "congratsTitle": {"pt": "Parabéns!", "en": "Well done!"},
    "congratsDesc": {
        "pt": "Treino concluído. Seus joelhos agradecem.",
        "en": "Workout complete. Your knees thank you.",
    },
    "backHome": {"pt": "Voltar ao início", "en": "Back to home"},
}


class LanguageContext(EventDispatcher):
    """Current UI language and translation lookup."""

    language = OptionProperty(DEFAULT_LANGUAGE, options=list(LANGUAGES))

    def t(self, key: str) -> str:
        """Translate ``key``; unknown keys are returned unchanged."""

        return TRANSLATIONS.get(key, {}).get(self.language) or key

    def pick(self, texts: dict[str, str]) -> str:
        """Select the current language from a catalog text map."""

        return localized(texts, self.language)

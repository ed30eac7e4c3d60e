"""
    ConsoleErrorHandler (générique, configurable)
"""
from process_commander.errors.base import ErrorHandler
from process_commander.errors.exceptions import (ApplicationError,
                                                 ConfigurationError,
                                                 InvocationNotFoundError,
                                                 ProcessExitError,
                                                 StreamWriteError,
                                                 WorkingDirectoryError)


class ConsoleErrorHandler(ErrorHandler):
    """Handler pour afficher les erreurs dans la console.

    Distingue les erreurs connues (ApplicationError) des erreurs
    inattendues, et affiche un message de solution adapté au type
    d'erreur.
    """

    DEFAULT_SOLUTIONS: dict[type[Exception], str] = {
        InvocationNotFoundError:
            "Vérifiez que le programme est installé et présent "
            "dans le $PATH.",
        WorkingDirectoryError:
            "Vérifiez le répertoire de travail de la commande.",
        ProcessExitError:
            "Consultez la sortie d'erreur capturée de la commande.",
        StreamWriteError:
            "Vérifiez les destinations de sortie ajoutées à la commande.",
        ConfigurationError:
            "Vérifiez votre fichier de configuration.",
    }

    def __init__(
        self,
        base_error_type: type[Exception] = ApplicationError,
        solutions: dict[type[Exception], str] | None = None
    ) -> None:
        """Initialise le handler console.

        Args:
            base_error_type: Classe de base pour distinguer erreurs
                connues/inconnues (défaut: ApplicationError).
            solutions: Dictionnaire {TypeException: "message solution"}
                fusionné avec DEFAULT_SOLUTIONS. Les entrées fournies
                sont prioritaires.
        """
        self.base_error_type = base_error_type
        self.solutions = {**self.DEFAULT_SOLUTIONS, **(solutions or {})}

    def handle(self, error: Exception) -> None:
        """Affiche l'erreur dans la console avec des messages utilisateur.

        Args:
            error: L'exception à afficher.
        """
        if isinstance(error, self.base_error_type):
            self._handle_known_error(error)
        else:
            self._handle_unknown_error(error)

    def _solution_for(self, error: Exception) -> str:
        """Retourne la solution la plus spécifique pour une erreur.

        Parcourt la MRO de l'erreur afin qu'une sous-classe hérite de la
        solution de son parent le plus proche.

        Args:
            error: L'exception à décrire.
        """
        for klass in type(error).__mro__:
            if klass in self.solutions:
                return self.solutions[klass]
        return "Voir les suggestions ci-dessus."

    def _handle_known_error(self, error: Exception) -> None:
        """Gère les erreurs connues du projet.

        Args:
            error: L'exception métier à traiter.
        """
        print(f"\n🛑 {type(error).__name__}: {str(error)}")
        print(f"\n🔧 Solution : {self._solution_for(error)}")

    def _handle_unknown_error(self, error: Exception) -> None:
        """Gère les erreurs inattendues.

        Args:
            error: L'exception non prévue à afficher.
        """
        print(f"\n💥 Erreur inattendue: {str(error)}")
        print(f"Type: {type(error).__name__}")
        print(
            "\n📋 Cela peut être un bug. Veuillez ouvrir une issue avec ces informations."
        )

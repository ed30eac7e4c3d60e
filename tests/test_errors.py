#!/usr/bin/env python3
"""Tests unitaires pour le module errors."""

import unittest
from unittest.mock import MagicMock, patch

from process_commander.commands import ExecutionResult
from process_commander.errors.base import ErrorHandler, ErrorHandlerChain
from process_commander.errors.exceptions import (ApplicationError,
                                                 CommanderError,
                                                 ConfigurationError,
                                                 FileConfigurationError,
                                                 InvocationNotFoundError,
                                                 ProcessError,
                                                 ProcessExitError,
                                                 StreamWriteError,
                                                 ValidationError,
                                                 WorkingDirectoryError,
                                                 WorkingDirectoryInvalidError)
from process_commander.errors.console_handler import ConsoleErrorHandler
from process_commander.errors.logger_handler import LoggerErrorHandler
from process_commander.logging.base import Logger


class TestExceptions(unittest.TestCase):
    """Tests pour la hiérarchie d'exceptions."""

    def test_hierarchie_commander(self):
        """Les erreurs d'exécution dérivent de CommanderError."""
        for error_type in (WorkingDirectoryError, InvocationNotFoundError,
                           ProcessError, ProcessExitError, StreamWriteError):
            self.assertTrue(issubclass(error_type, CommanderError))
        self.assertTrue(issubclass(CommanderError, ApplicationError))

    def test_repertoire_invalide_est_une_validation(self):
        """WorkingDirectoryInvalidError est aussi une ValidationError."""
        error = WorkingDirectoryInvalidError("absent")
        self.assertIsInstance(error, WorkingDirectoryError)
        self.assertIsInstance(error, ValidationError)

    def test_exit_status(self):
        """Le message reprend le code retour."""
        error = ProcessExitError(2)
        self.assertEqual(str(error), "exit status 2")
        self.assertEqual(error.return_code, 2)

    def test_exit_signal(self):
        """Un code négatif est présenté comme un signal."""
        self.assertEqual(str(ProcessExitError(-15)), "signal: 15")

    def test_stream_write_error(self):
        """StreamWriteError conserve le flux et la cause."""
        cause = OSError("disque plein")
        error = StreamWriteError("stderr", cause)
        self.assertEqual(error.stream, "stderr")
        self.assertIs(error.cause, cause)
        self.assertIn("stderr", str(error))
        self.assertIn("disque plein", str(error))

    def test_invocation_not_found(self):
        """InvocationNotFoundError conserve l'invocation."""
        error = InvocationNotFoundError("xyz", "introuvable")
        self.assertEqual(error.invocation, "xyz")
        self.assertEqual(str(error), "introuvable")


class TestConsoleErrorHandler(unittest.TestCase):
    """Tests pour ConsoleErrorHandler."""

    def setUp(self):
        self.handler = ConsoleErrorHandler()

    @patch("builtins.print")
    def test_handle_invocation_not_found(self, mock_print):
        """Vérifie le message pour InvocationNotFoundError."""
        error = InvocationNotFoundError("rsync", "rsync introuvable")
        self.handler.handle(error)
        mock_print.assert_any_call(
            "\n🛑 InvocationNotFoundError: rsync introuvable"
        )
        mock_print.assert_any_call(
            "\n🔧 Solution : Vérifiez que le programme est installé "
            "et présent dans le $PATH."
        )

    @patch("builtins.print")
    def test_handle_subclass_matches_parent(self, mock_print):
        """WorkingDirectoryInvalidError hérite de la solution du parent."""
        error = WorkingDirectoryInvalidError("absent")
        self.handler.handle(error)
        mock_print.assert_any_call(
            "\n🔧 Solution : Vérifiez le répertoire de travail "
            "de la commande."
        )

    @patch("builtins.print")
    def test_handle_exit_error(self, mock_print):
        """Vérifie le message pour ProcessExitError."""
        self.handler.handle(ProcessExitError(1))
        mock_print.assert_any_call(
            "\n🔧 Solution : Consultez la sortie d'erreur capturée "
            "de la commande."
        )

    @patch("builtins.print")
    def test_handle_configuration_error(self, mock_print):
        """FileConfigurationError hérite de ConfigurationError."""
        self.handler.handle(FileConfigurationError("fichier invalide"))
        mock_print.assert_any_call(
            "\n🔧 Solution : Vérifiez votre fichier de configuration."
        )

    @patch("builtins.print")
    def test_handle_generic_error(self, mock_print):
        """Vérifie le message par défaut pour une erreur sans solution."""
        self.handler.handle(ValidationError("validation échouée"))
        mock_print.assert_any_call(
            "\n🔧 Solution : Voir les suggestions ci-dessus."
        )

    @patch("builtins.print")
    def test_solutions_personnalisees(self, mock_print):
        """Les solutions fournies remplacent celles par défaut."""
        handler = ConsoleErrorHandler(
            solutions={ProcessExitError: "Relancez avec --verbose."}
        )
        handler.handle(ProcessExitError(1))
        mock_print.assert_any_call("\n🔧 Solution : Relancez avec --verbose.")

    @patch("builtins.print")
    def test_handle_unknown_error(self, mock_print):
        """Vérifie le message pour une erreur inattendue."""
        self.handler.handle(RuntimeError("boom"))
        mock_print.assert_any_call("\n💥 Erreur inattendue: boom")
        mock_print.assert_any_call("Type: RuntimeError")


class TestLoggerErrorHandler(unittest.TestCase):
    """Tests pour LoggerErrorHandler."""

    def setUp(self):
        self.logger = MagicMock(spec=Logger)
        self.handler = LoggerErrorHandler(self.logger)

    def test_erreur_connue(self):
        """Une erreur connue est loguée en erreur avec son type."""
        self.handler.handle(ConfigurationError("config invalide"))
        self.logger.log_error.assert_called_once_with(
            "ConfigurationError: config invalide"
        )

    def test_code_retour_en_avertissement(self):
        """Un code retour non nul est logué en avertissement."""
        self.handler.handle(ProcessExitError(3))
        self.logger.log_warning.assert_called_once_with(
            "ProcessExitError: exit status 3"
        )
        self.logger.log_error.assert_not_called()

    def test_erreur_inattendue(self):
        """Une erreur inattendue est préfixée."""
        self.handler.handle(KeyError("x"))
        self.logger.log_error.assert_called_once_with(
            "Erreur inattendue: KeyError: 'x'"
        )


class TestErrorHandlerChain(unittest.TestCase):
    """Tests pour ErrorHandlerChain."""

    def setUp(self):
        self.first = MagicMock(spec=ErrorHandler)
        self.second = MagicMock(spec=ErrorHandler)
        self.chain = (
            ErrorHandlerChain()
            .add_handler(self.first)
            .add_handler(self.second)
        )

    def test_handle_diffuse_a_tous(self):
        """Chaque handler reçoit l'erreur dans l'ordre d'ajout."""
        error = ProcessExitError(1)
        self.chain.handle(error)
        self.first.handle.assert_called_once_with(error)
        self.second.handle.assert_called_once_with(error)

    def test_handle_result_en_erreur(self):
        """handle_result diffuse l'erreur d'un résultat."""
        error = ProcessExitError(1)
        handled = self.chain.handle_result(ExecutionResult(error=error))
        self.assertTrue(handled)
        self.first.handle.assert_called_once_with(error)

    def test_handle_result_en_succes(self):
        """handle_result ignore un résultat sans erreur."""
        handled = self.chain.handle_result(ExecutionResult(error=None))
        self.assertFalse(handled)
        self.first.handle.assert_not_called()

    @patch("process_commander.errors.base.sys.exit")
    def test_handle_and_exit(self, mock_exit):
        """handle_and_exit traite l'erreur puis termine."""
        error = ProcessExitError(1)
        self.chain.handle_and_exit(error, exit_code=2)
        self.second.handle.assert_called_once_with(error)
        mock_exit.assert_called_once_with(2)


if __name__ == "__main__":
    unittest.main()

"""German interface strings."""

from __future__ import annotations

from dockterm.i18n.english import TranslationSet


def german_set() -> TranslationSet:
    """Return the German translation set; entries left empty fall back to English."""
    return TranslationSet(
        pruning_status="zerstören",
        removing_status="entfernen",
        restarting_status="neustarten",
        stopping_status="anhalten",
        running_custom_command_status="führt benutzerdefinierten Befehl aus",
        no_view_maching_new_line_focused_switch_statement=(
            "No view matching newLineFocused switch statement"
        ),
        error_occurred=(
            "Es ist ein Fehler aufgetreten! Bitte erstelle ein Issue hier: "
            "https://github.com/jesseduffield/lazydocker/issues"
        ),
        connection_failed=(
            "Verbindung zum Docker Client fehlgeschlagen. "
            "Du musst ggf. den Docker Client neustarten."
        ),
        unattachable_container_error=(
            "Der Container bietet keine Unterstützung für das Anbinden. Du musst den "
            "Dienst entweder mit der '-it' Flagge benutzen oder "
            "`stdin_open: true, tty: true` in der docker-compose.yml Datei setzen."
        ),
        cannot_attach_stopped_container_error=(
            "Du kannst keinen angehaltenen Container anbinden. Du musst ihn erst "
            "starten (was du tun kannst, indem du 'r' drückst), (ja, ich bin zu faul "
            "um das zu automatisieren) (aber ist schon cool, dass ich so eine "
            "Konversation durch eine Fehlermeldung mit dir führen kann)"
        ),
        cannot_access_docker_socket_error=(
            "Kann nicht auf den Socket zugreifen: unix:///var/run/docker.sock\n"
            "Führe lazydocker als root aus oder lese "
            "https://docs.docker.com/install/linux/linux-postinstall/"
        ),
        donate="Spenden",
        confirm="Bestätigen",
        return_="zurück",
        focus_main="fokussieren aufs Hauptpanel",
        navigate="navigieren",
        execute="ausführen",
        close="schließen",
        menu="menü",
        menu_title="Menü",
        scroll="scrollen",
        open_config="öffne lazydocker Konfiguration",
        edit_config="bearbeite lazydocker Konfiguration",
        cancel="abbrechen",
        remove="entfernen",
        force_remove="Entfernen erzwingen",
        remove_with_volumes="entferne mit Volumes",
        remove_service="entferne Container",
        stop="anhalten",
        restart="neustarten",
        rebuild="neubauen",
        recreate="neuerstellen",
        previous_context="vorheriges Tab",
        next_context="nächstes Tab",
        attach="anbinden",
        view_logs="zeige Protokolle",
        remove_image="entferne Image",
        remove_volume="entferne Volume",
        remove_network="entferne Netzwerk",
        remove_without_prune="entfernen, ohne die unmarkierten Eltern zu entfernen",
        prune_containers="entferne verlassene Container",
        prune_volumes="entferne unbenutzte Volumes",
        prune_networks="entferne unbenutzte Netzwerk",
        prune_images="entferne unbenutzte Images",
        view_restart_options="zeige Neustartoptionen",
        run_custom_command="führe vordefinierten benutzerdefinierten Befehl aus",
        global_title="Global",
        main_title="Haupt",
        project_title="Projekt",
        services_title="Dienste",
        containers_title="Container",
        standalone_containers_title="Alleinstehende Container",
        images_title="Images",
        volumes_title="Volumes",
        networks_title="Netzwerk",
        custom_command_title="Benutzerdefinierter Befehl",
        error_title="Fehler",
        logs_title="Protokoll",
        config_title="Konfiguration",
        env_title="Env",
        docker_compose_config_title="Docker-Compose Konfiguration",
        top_title="Top",
        stats_title="Statistiken",
        credits_title="Über Uns",
        container_config_title="Container Konfiguration",
        container_env_title="Container Env",
        nothing_to_display="Nothing to display",
        cannot_display_env_variables=(
            "Something went wrong while displaying environment variables"
        ),
        no_containers="Keine Container",
        no_container="Kein Container",
        no_images="Keine Images",
        no_volumes="Keine Volumes",
        no_networks="Keine Netzwerk",
        confirm_quit="Bist du dir sicher, dass du verlassen möchtest?",
        must_force_to_remove_container=(
            "Du kannst keinen Container entfernen, der noch ausgeführt wird außer du "
            "erzwingst es. Möchtest du es erzwingen?"
        ),
        not_enough_space="Nicht genug Platz um die Panel darzustellen",
        confirm_prune_images=(
            "Bist du dir sicher, dass du alle unbenutzten Images entfernen möchtest?"
        ),
        confirm_prune_containers=(
            "Bist du dir sicher, dass du alle angehaltenen Container entfernen möchtes?"
        ),
        confirm_prune_volumes=(
            "Bist du dir sicher, dass du alle unbenutzen Volumes entfernen möchtest?"
        ),
        confirm_prune_networks=(
            "Bist du dir sicher, dass du alle unbenutzen Netzwerk entfernen möchtest?"
        ),
        stop_service=(
            "Bist du dir sicher, dass du den Dienst dieses Containers anhalten möchtest?"
        ),
        stop_container="Bist du dir sicher, dass du den Container anhalten möchtest?",
        press_enter_to_return=(
            "Drücke Eingabe um zu lazydocker zurückzukehren. (Diese Nachfrage kann in "
            "Deiner Konfiguration deaktiviert werden, indem du folgenden Wert setzt: "
            "`gui.returnImmediately: true`)"
        ),
        detach_from_container_short_cut=(
            "Um sich vom Container zu trennen, drücken Sie standardmäßig ctrl-p "
            "\u200b\u200bund dann ctrl-q"
        ),
    )
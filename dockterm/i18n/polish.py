"""Polish interface strings."""

from __future__ import annotations

from dockterm.i18n.english import TranslationSet


def polish_set() -> TranslationSet:
    """Return the Polish translation set; entries left empty fall back to English."""
    return TranslationSet(
        pruning_status="czyszczenie",
        removing_status="usuwanie",
        restarting_status="restartowanie",
        stopping_status="zatrzymywanie",
        running_custom_command_status="uruchamianie własnej komendty",
        no_view_maching_new_line_focused_switch_statement=(
            "Żaden widok nie odpowiada instrukcji przełączenia newLineFocused"
        ),
        error_occurred=(
            "Wystąpił błąd! Proszę go zgłosić na "
            "https://github.com/jesseduffield/lazydocker/issues"
        ),
        connection_failed=(
            "Błąd połączenia z Dockerem. Być może należy go zrestartować."
        ),
        unattachable_container_error=(
            "Kontener nie obsługuje przyczepiania (attach). Musisz albo użyć flag "
            "'-it', albo `stdin_open: true, tty: true` w pliku docker-compose.yml."
        ),
        cannot_attach_stopped_container_error=(
            "Nie można przyczepić się do zatrzymanego kontenera, należy go najpierw "
            "uruchomić (co można wykonać wciskając przycisk 'r')"
        ),
        cannot_access_docker_socket_error=(
            "Nie udało się uzyskać dostępu do unix:///var/run/docker.sock\n"
            "Uruchom program jako root lub przeczytaj "
            "https://docs.docker.com/install/linux/linux-postinstall/"
        ),
        donate="Dotacja",
        confirm="Potwierdź",
        return_="powrót",
        focus_main="skup na głównym panelu",
        navigate="nawigowanie",
        execute="wykonaj",
        close="zamknij",
        menu="menu",
        menu_title="Menu",
        scroll="przewiń",
        open_config="otwórz konfigurację",
        edit_config="edytuj konfigurację",
        cancel="anuluj",
        remove="usuń",
        force_remove="usuń siłą",
        remove_with_volumes="usuń z wolumenami",
        remove_service="usuń kontenery",
        stop="zatrzymaj",
        restart="restartuj",
        rebuild="przebuduj",
        recreate="odtwórz",
        previous_context="poprzednia zakładka",
        next_context="następna zakładka",
        attach="przyczep",
        view_logs="pokaż logi",
        remove_image="usuń obraz",
        remove_volume="usuń wolumen",
        remove_network="usuń sieci",
        remove_without_prune="usuń bez kasowania nieoznaczonych rodziców",
        prune_containers="wyczyść kontenery",
        prune_volumes="wyczyść nieużywane wolumeny",
        prune_networks="wyczyść nieużywane sieci",
        prune_images="wyczyść nieużywane obrazy",
        view_restart_options="pokaż opcje restartu",
        run_custom_command="wykonaj predefiniowaną własną komende",
        global_title="Globalne",
        main_title="Główne",
        project_title="Projekt",
        services_title="Serwisy",
        containers_title="Kontenery",
        standalone_containers_title="Kontenery samodzielne",
        images_title="Obrazy",
        volumes_title="Wolumeny",
        networks_title="Sieci",
        custom_command_title="Własna komenda:",
        error_title="Błąd",
        logs_title="Logi",
        config_title="Konfiguracja",
        env_title="Env",
        docker_compose_config_title="Konfiguracja docker-compose",
        top_title="Top",
        stats_title="Staty",
        credits_title="O",
        container_config_title="Konfiguracja kontenera",
        container_env_title="Container Env",
        nothing_to_display="Nothing to display",
        cannot_display_env_variables=(
            "Something went wrong while displaying environment variables"
        ),
        no_containers="Brak kontenerów",
        no_container="Brak kontenera",
        no_images="Brak obrazów",
        no_volumes="Brak wolumenów",
        no_networks="Brak sieci",
        confirm_quit="Na pewno chcesz wyjść?",
        must_force_to_remove_container=(
            "Nie możesz usunąć uruchomionego kontenera dopóki nie zrobisz tego siłą. "
            "Chcesz wykonać to z siłą?"
        ),
        not_enough_space="Niedostateczna ilość miejsca do wyświetlenia paneli",
        confirm_prune_images="Na pewno wyczyścić wszystkie nieużywane obrazy?",
        confirm_prune_containers=(
            "Na pewno wyczyścić wszystkie nieuruchomione kontenery?"
        ),
        confirm_prune_volumes="Na pewno wyczyścić wszystkie nieużywane wolumeny?",
        confirm_prune_networks="Na pewno wyczyścić wszystkie nieużywane sieci?",
        stop_service="Na pewno zatrzymać kontenery tego serwisu?",
        stop_container="Na pewno zatrzymać ten kontener?",
        press_enter_to_return=(
            "Wciśnij enter aby powrócić do lazydockera (ten komunikat może być "
            "wyłączony w konfiguracji poprzez ustawienie `gui.returnImmediately: true`)"
        ),
        detach_from_container_short_cut=(
            "Domyślnie, aby odłączyć się od kontenera, naciśnij ctrl-p, "
            "a następnie ctrl-q"
        ),
    )
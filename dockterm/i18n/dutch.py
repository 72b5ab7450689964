"""Dutch interface strings."""

from __future__ import annotations

from dockterm.i18n.english import TranslationSet


def dutch_set() -> TranslationSet:
    """Return the Dutch translation set; entries left empty fall back to English."""
    return TranslationSet(
        pruning_status="vernietigen",
        removing_status="verwijderen",
        restarting_status="herstarten",
        stopping_status="stoppen",
        running_custom_command_status="Aangepast commando draaien",
        no_view_maching_new_line_focused_switch_statement=(
            "No view matching newLineFocused switch statement"
        ),
        error_occurred=(
            "Er is iets fout gegaan! Zou je hier een issue aan willen maken: "
            "https://github.com/jesseduffield/lazydocker/issues"
        ),
        connection_failed=(
            "connectie naar de docker client mislukt. "
            "Het zou kunnen dat je de docker client moet herstarten"
        ),
        unattachable_container_error=(
            "Container heeft geen ondersteuning voor vastmaken. Je zou de service met "
            "het '-it' argument kunnen draaien of stop dit in je "
            "`stdin_open: true, tty: true` docker-compose.yml"
        ),
        cannot_attach_stopped_container_error=(
            "Je kan niet een vastgemaakte container stoppen, je moet het eerst starten "
            "(dit kan je doen met de 'r' toets) (ja ik ben te leu om dat voor je te "
            "doen automatisch)"
        ),
        cannot_access_docker_socket_error=(
            "Kan de docker socket niet bereiken: unix:///var/run/docker.sock\n"
            "Draai lazydocker als root of lees "
            "https://docs.docker.com/install/linux/linux-postinstall/"
        ),
        donate="Doneer",
        confirm="Bevestigen",
        return_="terug",
        focus_main="focus hoofdpaneel",
        navigate="navigeer",
        execute="voer uit",
        close="sluit",
        menu="menu",
        menu_title="Menu",
        scroll="scroll",
        open_config="open de lazydocker configuratie",
        edit_config="verander de lazydocker configuratie",
        cancel="annuleren",
        remove="verwijder",
        hide_stopped="verberg gestopte containers",
        force_remove="geforceerd verwijderen",
        remove_with_volumes="verwijder met volumes",
        remove_service="verwijder containers",
        stop="stop",
        restart="herstart",
        rebuild="herbouw",
        recreate="hercreëer",
        previous_context="vorige tab",
        next_context="volgende tab",
        attach="verbinden",
        view_logs="bekijk logs",
        remove_image="verwijder image",
        remove_volume="verwijder volume",
        remove_network="verwijder network",
        remove_without_prune="verwijder zonder de ongelabeld ouders te verwijderen",
        prune_containers="vernietig bestaande containers",
        prune_volumes="vernietig ongebruikte volumes",
        prune_networks="vernietig ongebruikte networks",
        prune_images="vernietig ongebruikte images",
        view_restart_options="bekijk herstart opties",
        run_custom_command="draai een vooraf bedacht aangepaste opdracht",
        global_title="Globaal",
        main_title="Hoofd",
        project_title="Project",
        services_title="Diensten",
        containers_title="Containers",
        standalone_containers_title="Alleenstaande Containers",
        images_title="Images",
        volumes_title="Volumes",
        networks_title="Networks",
        custom_command_title="Aangepast commando:",
        error_title="Fout",
        logs_title="Logs",
        config_title="Config",
        env_title="Env",
        docker_compose_config_title="Docker-Compose Configuratie",
        top_title="Top",
        stats_title="Stats",
        credits_title="Over",
        container_config_title="Container Configuratie",
        container_env_title="Container Env",
        nothing_to_display="Nothing to display",
        cannot_display_env_variables=(
            "Something went wrong while displaying environment variables"
        ),
        no_containers="Geen containers",
        no_container="Geen container",
        no_images="Geen images",
        no_volumes="Geen volumes",
        no_networks="Geen networks",
        confirm_quit="Weet je zeker dat je weg wil gaan?",
        must_force_to_remove_container=(
            "Je kan geen draaiende container verwijderen tenzij je het forceert, "
            "Wil je het forceren?"
        ),
        not_enough_space="Niet genoeg ruimte om de panelen te renderen",
        confirm_prune_images=(
            "Weet je zeker dat je alle niet gebruikte images wil vernietigen?"
        ),
        confirm_prune_containers=(
            "Weet je zeker dat je alle niet gestopte containers wil vernietigen?"
        ),
        confirm_prune_volumes=(
            "Weet je zeker dat je alle niet gebruikte volumes wil vernietigen?"
        ),
        confirm_prune_networks=(
            "Weet je zeker dat je alle niet gebruikte networks wil vernietigen?"
        ),
        stop_service="Weet je zeker dat je deze service zijn containers wil stoppen?",
        stop_container="Weet je zeker dat je deze container wil stoppen?",
        press_enter_to_return=(
            "Druk op enter om terug te gaan naar lazydocker (Deze popup kan uit gezet "
            "worden door in de config dit neer te zetten `gui.returnImmediately: true`)"
        ),
        detach_from_container_short_cut=(
            "Als u wilt loskoppelen van de container, drukt u standaard op ctrl-p "
            "en vervolgens op ctrl-q"
        ),
    )
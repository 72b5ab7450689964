"""French interface strings."""

from __future__ import annotations

from dockterm.i18n.english import TranslationSet


def french_set() -> TranslationSet:
    """Return the French translation set; entries left empty fall back to English."""
    return TranslationSet(
        pruning_status="destruction",
        removing_status="suppression",
        restarting_status="redémarrage",
        starting_status="démarrage",
        stopping_status="arrêt",
        pausing_status="mise en pause",
        running_custom_command_status="exécution de la commande personalisée",
        running_bulk_command_status="exécution de la commande groupée",
        no_view_maching_new_line_focused_switch_statement=(
            "Aucune vue correspondant au switch newLineFocused"
        ),
        error_occurred=(
            "Une erreur s'est produite ! Veuillez créer un rapport d'erreur sur "
            "https://github.com/jesseduffield/lazydocker/issues"
        ),
        connection_failed=(
            "Erreur lors de la connexion au client Docker. "
            "Essayez de redémarrer votre client Docker"
        ),
        unattachable_container_error=(
            "Le conteneur ne peut pas être attaché. Vous devez exécuter le service "
            "avec le drapeau 'it' ou bien utiliser `stdin_open: true, tty: true` "
            "dans votre fichier docker-compose.yml"
        ),
        waiting_for_container_info=(
            "Le processus ne peut pas continuer avant que Docker ne fournisse plus "
            "d'informations. Veuillez réessayer dans quelques instants."
        ),
        cannot_attach_stopped_container_error=(
            "Vous ne pouvez pas vous attacher à un conteneur arrêté, vous devez le "
            "démarrer en amont (ce que vous pouvez faire avec la touche 'r') (oui, "
            "je suis trop paresseux pour le faire automatiquement pour vous) "
            "(plutôt cool que je puisse communiquer en tête-à-tête avec vous au "
            "travers d'un message d'erreur, cependant)"
        ),
        cannot_access_docker_socket_error=(
            "Impossible d'accéder au socket Docker à : unix:///var/run/docker.sock\n"
            "Lancez lazydocker en tant que root ou alors lisez "
            "https://docs.docker.com/install/linux/linux-postinstall/"
        ),
        cannot_kill_child_error=(
            "Trois secondes se sont écoulées depuis la demande d'arrêt des processus "
            "enfants. Il se peut qu'un processus orphelin continue à tourner sur "
            "votre système."
        ),
        donate="Donner",
        confirm="Confirmer",
        return_="retour",
        focus_main="focus panneau principal",
        navigate="naviguer",
        execute="exécuter",
        close="fermer",
        menu="menu",
        menu_title="Menu",
        scroll="faire défiler",
        open_config="ouvrir la configuration lazydocker",
        edit_config="modifier la configuration lazydocker",
        cancel="annuler",
        remove="supprimer",
        hide_stopped="cacher/montrer les conteneurs arrêtés",
        force_remove="forcer la suppression",
        remove_with_volumes="supprimer avec les volumes",
        remove_service="supprimer les conteneurs",
        stop="arrêter",
        pause="pause",
        restart="redémarrer",
        start="démarrer",
        rebuild="reconstruire",
        recreate="recréer",
        previous_context="onglet précédent",
        next_context="onglet suivant",
        attach="attacher",
        view_logs="voir les enregistrements",
        remove_image="supprimer l'image",
        remove_volume="supprimer le volume",
        remove_network="supprimer le réseau",
        remove_without_prune="supprimer sans effacer les parents non étiquetés",
        remove_without_prune_with_force=(
            "supprimer (forcer) sans effacer les parents non étiquetés"
        ),
        remove_with_force="supprimer (forcer)",
        prune_containers="détruire les conteneurs arrêtés",
        prune_volumes="détruire les volumes non utilisés",
        prune_networks="détruire les réseaux non utilisés",
        prune_images="détruire les images non utilisées",
        stop_all_containers="arrêter tous les conteneurs",
        remove_all_containers="supprimer tous les conteneurs (forcer)",
        view_restart_options="voir les options de redémarrage",
        exec_shell="exécuter le shell",
        run_custom_command="exécuter une commande prédéfinie",
        view_bulk_commands="voir les commandes groupées",
        open_in_browser="ouvrir dans le navigateur (le premier port est http)",
        sort_containers_by_state="ordonner les conteneurs par état",
        global_title="Global",
        main_title="Principal",
        project_title="Projet",
        services_title="Services",
        containers_title="Conteneurs",
        standalone_containers_title="Conteneurs autonomes",
        images_title="Images",
        volumes_title="Volumes",
        networks_title="Réseaux",
        custom_command_title="Commande personnalisée :",
        bulk_command_title="Commande groupée :",
        error_title="Erreur",
        logs_title="Journaux",
        config_title="Config",
        env_title="Env",
        docker_compose_config_title="Config Docker-Compose",
        top_title="Top",
        stats_title="Statistiques",
        credits_title="À propos",
        container_config_title="Config Conteneur",
        container_env_title="Env Conteneur",
        nothing_to_display="Rien à afficher",
        cannot_display_env_variables=(
            "Quelque chose a échoué lors de l'affichage des variables d'environnement"
        ),
        no_containers="Aucun conteneur",
        no_container="Aucun conteneur",
        no_images="Aucune image",
        no_volumes="Aucun volume",
        no_networks="Aucun réseau",
        confirm_quit="Êtes-vous certain de vouloir quitter ?",
        must_force_to_remove_container=(
            "Vous ne pouvez pas supprimer un conteneur qui tourne sans le forcer. "
            "Voulez-vous le forcer ?"
        ),
        not_enough_space="Manque d'espace pour afficher les différent panneaux",
        confirm_prune_images=(
            "Êtes-vous certain de vouloir détruire toutes les images non utilisées ?"
        ),
        confirm_prune_containers=(
            "Êtes-vous certain de vouloir détruire tous les conteneurs arrêtés ?"
        ),
        confirm_stop_containers="Êtes-vous certain de vouloir arrêter tous les conteneurs ?",
        confirm_remove_containers=(
            "Êtes-vous certain de vouloir supprimer tous les conteneurs ?"
        ),
        confirm_prune_volumes=(
            "Êtes-vous certain de vouloir détruire tous les volumes non utilisés ?"
        ),
        confirm_prune_networks=(
            "Êtes-vous certain de vouloir détruire tous les réseaux non utilisés ?"
        ),
        stop_service="Êtes-vous certain de vouloir arrêter le conteneur de ce service ?",
        stop_container="Êtes-vous certain de vouloir arrêter ce conteneur ?",
        press_enter_to_return=(
            "Appuyez sur Entrée pour revenir à lazydocker (ce message peut être "
            "désactivé dans vos configurations en appliquant "
            "`gui.returnImmediately: true`)"
        ),
        detach_from_container_short_cut=(
            "Par défaut, pour se détacher du conteneur appuyez sur CTRL-P puis CTRL-Q"
        ),
        no="non",
        yes="oui",
    )